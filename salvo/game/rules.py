"""Turn resolution between the human player and the CPU attacker."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from salvo.ai.player import CpuAttacker
from salvo.core.board import BoardState
from salvo.core.fleet import build_board_from_fleet
from salvo.core.models import AttackOutcome, FleetPlacement, Position, ShotResult, Turn

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameSession:
    """Runtime game session state."""

    player_board: BoardState
    cpu_board: BoardState
    turn: Turn = Turn.PLAYER
    winner: Turn | None = None
    last_message: str = "Place your fleet."
    history: list[str] = field(default_factory=list)

    def announce(self, message: str) -> None:
        self.last_message = message
        self.history.append(message)
        logger.info("game_event %s", message)


def create_session(player_fleet: FleetPlacement, cpu_fleet: FleetPlacement) -> GameSession:
    """Create a game session from fleet placements."""
    session = GameSession(
        player_board=build_board_from_fleet(player_fleet),
        cpu_board=build_board_from_fleet(cpu_fleet),
        turn=Turn.PLAYER,
    )
    session.announce("Battle started. Your turn.")
    return session


def player_fire(session: GameSession, position: Position) -> ShotResult:
    """Resolve player shot at the CPU board."""
    if session.winner is not None or session.turn is not Turn.PLAYER:
        return ShotResult.INVALID

    result, sunk_type = session.cpu_board.apply_shot(position)
    if result is ShotResult.REPEAT:
        session.last_message = "This position has already been attacked."
        return result

    if result is ShotResult.MISS:
        session.announce(f"Player MISSED at {position}.")
    elif result is ShotResult.HIT:
        session.announce(f"Player HIT at {position}!")
    else:
        session.announce(f"Player HIT at {position}!")
        session.announce(f"Enemy {sunk_type.value if sunk_type else 'ship'} has been sunk!")

    session.turn = Turn.CPU
    if session.cpu_board.all_ships_sunk():
        session.winner = Turn.PLAYER
        session.turn = Turn.PLAYER
        session.announce("Player wins! All enemy ships sunk!")
    return result


def cpu_turn(session: GameSession, attacker: CpuAttacker) -> tuple[Position, ShotResult] | None:
    """Ask the attacker for a target, apply it to the player board, report back."""
    if session.winner is not None or session.turn is not Turn.CPU:
        return None

    attacker.bind_board(session.player_board)
    target = attacker.determine_next_attack()
    if target is None:
        session.turn = Turn.PLAYER
        return None

    result, sunk_type = session.player_board.apply_shot(target)
    attacker.report(target, AttackOutcome.from_shot(result, sunk_type))

    if result is ShotResult.MISS:
        session.announce(f"CPU MISSED at {target}.")
    else:
        session.announce(f"CPU HIT at {target}!")
    if result is ShotResult.SUNK:
        session.announce(f"Your {sunk_type.value if sunk_type else 'ship'} has been sunk!")

    session.turn = Turn.PLAYER
    if session.player_board.all_ships_sunk():
        session.winner = Turn.CPU
        session.turn = Turn.CPU
        session.announce("CPU wins! All your ships have been sunk!")
    return target, result
