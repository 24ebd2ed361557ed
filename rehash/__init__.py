"""Rehash: recompute content hashes of finished build artifacts.

Renames each main file (script or stylesheet) after the hash of its final
content and rewrites every reference to the old name in source maps and
runtime manifests, in one ordered pass.
"""

__version__ = "0.1.0"
__description__ = "Post-build content hash reconciliation for bundler output"

from rehash.core.reconciler import Reconciler, reconcile
from rehash.cli.app import app as cli

__all__ = ["Reconciler", "reconcile", "cli", "__version__"]
