"""Pipeline, models and configuration"""
