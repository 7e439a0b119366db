"""HTTP-Schnittstelle der Produktdaten-API."""
