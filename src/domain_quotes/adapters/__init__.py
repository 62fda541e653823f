"""
Adapters Layer - Data Sources and Presentation

This package contains adapters for loading pricing data and formatting quotes.
"""
