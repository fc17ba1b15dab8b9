"""Dish nutrition estimator service."""
