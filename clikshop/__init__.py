"""Product catalogue model, pricing helpers, exchange rate lookup and JSON/XLSX export."""

__version__ = "0.1.0"