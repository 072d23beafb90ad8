"""
alerts — Domain model for weather warnings.

Sub-modules:
    models  — WeatherWarning and WarningList
"""
