"""
Prefect flows for the data pipeline.

Flows:
- outlook: Build the weekly solunar + recommendation outlook into derived/
- offline: Download map tiles for an offline region

Usage (local):
    python -m bitebrain.flows.outlook
    bitebrain offline --name "Home lake" 40.1 39.9 -98.4 -98.7 --min-zoom 10 --max-zoom 13

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'build-outlook/default'
"""
