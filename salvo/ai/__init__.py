"""Attack strategy implementations."""

from salvo.ai.coordinator import ActiveStrategy, AttackCoordinator
from salvo.ai.directed_hunt import DirectedHunt, HuntPhase, HuntState
from salvo.ai.player import CpuAttacker
from salvo.ai.random_search import RandomSearch
from salvo.ai.strategy import AttackStrategy

__all__ = [
    "ActiveStrategy",
    "AttackCoordinator",
    "AttackStrategy",
    "CpuAttacker",
    "DirectedHunt",
    "HuntPhase",
    "HuntState",
    "RandomSearch",
]
