# shrinksim/tests/conftest.py
import matplotlib

matplotlib.use("Agg")
