# Repositories package init
"""
Blog API - Storage Access Package
===================================

What:  Storage interfaces and their database-backed implementations.
"""
