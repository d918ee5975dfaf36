"""monobump - release automation for pnpm monorepos.

Bumps every publishable package of a workspace in one go:
- Semantic version selection (presets, prereleases or a custom version)
- Partial releases limited to packages changed since the last tag
- Version propagation through internal dependencies
- Changelog generation, publishing, commit and tag
"""

from monobump.config import ReleaseConfig, load_config
from monobump.errors import (
    CommandError,
    ConfigurationError,
    GitError,
    MonobumpError,
    NoChangesError,
    PackageNotFoundError,
    PublishError,
    ReleaseError,
    ValidationError,
)
from monobump.versioning import (
    PropagationResult,
    ReleaseType,
    enumerate_candidates,
    propagate,
    resolve_choice,
)
from monobump.workspace import Package, Workspace

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core
    "Workspace",
    "Package",
    "ReleaseConfig",
    "load_config",
    # Versioning
    "ReleaseType",
    "PropagationResult",
    "enumerate_candidates",
    "resolve_choice",
    "propagate",
    # Errors
    "MonobumpError",
    "ConfigurationError",
    "GitError",
    "CommandError",
    "PublishError",
    "ReleaseError",
    "NoChangesError",
    "PackageNotFoundError",
    "ValidationError",
]
