"""Framework integrations for the twofactor package.

Import the submodule for the framework you use; each one needs its
framework installed (``pip install twofactor[fastapi]`` or ``[flask]``).
"""

__all__ = ["fastapi", "flask"]
