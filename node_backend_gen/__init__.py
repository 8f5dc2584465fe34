"""node-backend-gen -- scaffolds Node.js backend projects from built-in templates."""

__version__ = "1.0.0"
