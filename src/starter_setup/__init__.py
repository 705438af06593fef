"""Starter Setup.

Interactive setup wizard that customizes a freshly cloned Bun/TypeScript
starter template: it collects project metadata and optional feature
selections, then rewrites ``package.json``, removes unselected feature
files, patches shared configuration, and regenerates the README.

This package contains:
- Feature registry and resolution engine
- Manifest, file removal and README generation helpers
- The interactive command-line wizard
"""

# Version information
__version__ = "0.3.1"

__all__ = ["__version__"]
