"""Application interfaces (ports): store protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from vcache.infrastructure.
"""

from vcache.application.interfaces.stores import IKeyValueStore, ISettingsStore

__all__ = ["IKeyValueStore", "ISettingsStore"]
