"""
API package for the EDI mock response service.
RESTful boundary over the core request processor.
"""
