# flake8: noqa
"""
Document model, filter interface and filter composition.
"""
