"""Locator — maps acting URLs to deployment contexts and logical ids to URIs.

Location descriptors are registered wholesale from external configuration;
the acting URL of the running console selects which of them apply.
"""
