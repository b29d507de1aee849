"""
Report VCS status for every repository directly under a workspace directory.
"""

from workspace_status.models import RepoKind, RepoStatus
from workspace_status.probes import ProbeError, classify

__all__ = ["ProbeError", "RepoKind", "RepoStatus", "classify"]
