# Services package init
"""
Blog API - Business Logic Services
====================================

What:  Presence checks and response shaping, independent of HTTP.
How:   Services receive their storage handle per call and never touch
       the request or response objects.
"""
