"""Contracts (protocols) for adapter components."""

from which_platform.domain.contracts.refresh_scheduler import RefreshSchedulerProtocol
from which_platform.domain.contracts.settings_store import SettingsStoreProtocol

__all__ = ["RefreshSchedulerProtocol", "SettingsStoreProtocol"]
