"""
High-level engine client: typed requests on top of the raw API.

SC2Client pairs one API with one Debugger and turns envelope replies into
domain objects. A reply lacking the sub-message a request must produce
raises MissingSubmessageError carrying the engine's error strings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from sc2link.data.game_data import GameData
from sc2link.data.game_info import GameInfo
from sc2link.data.score import Score
from sc2link.debug.debugger import Debugger
from sc2link.exceptions import MissingSubmessageError
from sc2link.messaging.api import API
from sc2link.logging import setup_logging
from sc2link.messaging.connection import WebSocketConnection
from sc2link.messaging.types import (
    Request,
    RequestData,
    RequestGameInfo,
    RequestObservation,
    RequestPing,
    ResponsePing,
)
from sc2link.settings import ClientSettings

if TYPE_CHECKING:
    from sc2link.messaging.types import Response

logger = structlog.get_logger()


class SC2Client:
    def __init__(self, api: API, debugger: Debugger | None = None) -> None:
        self.api = api
        self.debugger = debugger or Debugger()

    @classmethod
    def connect(cls, settings: ClientSettings | None = None) -> SC2Client:
        """Configure logging and connect to the engine described by settings (or the environment)."""
        settings = settings or ClientSettings()
        setup_logging(settings.log_dir)
        return cls(API(WebSocketConnection.from_settings(settings)))

    def request_game_data(self) -> GameData:
        response = self.api.send(Request(data=RequestData()))
        if response.data is None:
            raise _missing("data", response)
        game_data = GameData.from_wire(response.data)
        logger.info(
            "game data loaded",
            abilities=len(game_data.abilities),
            units=len(game_data.units),
            upgrades=len(game_data.upgrades),
            buffs=len(game_data.buffs),
            effects=len(game_data.effects),
        )
        return game_data

    def request_game_info(self) -> GameInfo:
        response = self.api.send(Request(game_info=RequestGameInfo()))
        if response.game_info is None:
            raise _missing("game_info", response)
        return GameInfo.from_wire(response.game_info)

    def request_score(self, game_loop: int | None = None) -> Score:
        """Observe the game and return the current score snapshot."""
        response = self.api.send(Request(observation=RequestObservation(game_loop=game_loop)))
        return Score.from_response(response)

    def ping(self) -> ResponsePing:
        response = self.api.send(Request(ping=RequestPing()))
        if response.ping is None:
            raise _missing("ping", response)
        return response.ping

    def flush_debug(self) -> bool:
        """
        Send pending debug commands.

        Buffers are cleared only after the engine acknowledged the batch; on
        failure the same batch stays queued. Returns False if nothing was queued.
        """
        request = self.debugger.build_request()
        if request is None:
            return False
        self.api.send_request(request)
        self.debugger.clear_commands()
        return True

    def close(self) -> None:
        self.api.close()


def _missing(submessage: str, response: Response) -> MissingSubmessageError:
    return MissingSubmessageError(submessage, errors=tuple(response.error))
