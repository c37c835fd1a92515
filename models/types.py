"""Type definitions for Hue Control CLI.

This module provides TypedDict definitions for the v1 API payloads sent to
and received from the Hue Bridge.
"""

from typing import TypedDict


class PairingRequest(TypedDict):
    """Body POSTed to /api/ to register a new username."""
    devicetype: str


class PairingSuccess(TypedDict):
    """Contents of the 'success' entry in a pairing response."""
    username: str


class BridgeError(TypedDict, total=False):
    """Contents of an 'error' entry in a v1 API response."""
    type: int
    address: str
    description: str


class LightState(TypedDict, total=False):
    """Body of a PUT to lights/<id>/state."""
    on: bool
    bri: int


class ScheduleCommand(TypedDict):
    """The bridge-side request a schedule performs when it fires."""
    address: str
    method: str
    body: LightState


class SchedulePayload(TypedDict):
    """Body POSTed to schedules/ to create a schedule."""
    name: str
    command: ScheduleCommand
    localtime: str
