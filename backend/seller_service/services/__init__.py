"""Service layer.

Import services from their subpackages, e.g.
``from seller_service.services.auth import AuthService``:

- :mod:`.tokens`: issue / verify / rotate / revoke tokens
- :mod:`.auth`: signup / signin / refresh / logout
- :mod:`.sellers`: seller profile
- :mod:`.products`: seller-scoped products and images
- :mod:`.catalog`: public browsing

The package itself imports nothing so repositories can depend on the
shared ports without a cycle through the unit of work.
"""
