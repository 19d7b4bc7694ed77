import matplotlib

# Drawing tests run without a display
matplotlib.use("Agg")
