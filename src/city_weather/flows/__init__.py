"""
Prefect flows.

Flows:
- report: fetch current conditions + forecast for a city, aggregate daily

Usage (local):
    python -m city_weather.flows.report "Paris,FR"

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m city_weather.flows.report "Paris,FR"
"""
