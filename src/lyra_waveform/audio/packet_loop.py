"""Best-effort packet loop over a possibly corrupt stream.

Each iteration produces a :class:`PacketOutcome` tagged ``DATA``, ``SKIP``
or ``STOP``; :func:`run_packet_loop` consumes them and decides whether to
continue. Neither a corrupt packet nor a failed read aborts extraction:
corrupt packets are skipped, and a failed read ends the loop with whatever
has been decoded so far.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from av.error import FFmpegError
from loguru import logger

from ..errors import PacketReadError
from .amplitude import AmplitudeSeries
from .decoder import DecodedFrameBlock, Decoder
from .probe import DemuxedContainer

END_OF_STREAM = "end-of-stream"
READ_ERROR = "read-error"
OTHER_TRACK = "other-track"
DECODE_ERROR = "decode-error"


class StepKind(enum.Enum):
    DATA = "data"
    SKIP = "skip"
    STOP = "stop"


@dataclass(frozen=True)
class PacketOutcome:
    kind: StepKind
    blocks: tuple[DecodedFrameBlock, ...] = ()
    reason: str | None = None
    error: str | None = None


@dataclass
class DecodeReport:
    """Counters describing how a packet loop ended."""

    packets_decoded: int = 0
    packets_skipped: int = 0
    decode_errors: int = 0
    frames: int = 0
    stop_reason: str | None = None
    last_error: str | None = None

    @property
    def partial(self) -> bool:
        """``True`` when the loop stopped on a read error before EOF."""
        return self.stop_reason == READ_ERROR


def next_outcome(
    container: DemuxedContainer, decoder: Decoder, track_id: int
) -> PacketOutcome:
    """Pull and decode one packet, classifying the result."""
    try:
        packet = container.next_packet()
    except PacketReadError as exc:
        return PacketOutcome(StepKind.STOP, reason=READ_ERROR, error=str(exc))
    if packet is None:
        return PacketOutcome(StepKind.STOP, reason=END_OF_STREAM)
    if packet.stream_index != track_id:
        return PacketOutcome(StepKind.SKIP, reason=OTHER_TRACK)
    try:
        blocks = decoder.decode(packet)
    except (FFmpegError, ValueError) as exc:
        return PacketOutcome(StepKind.SKIP, reason=DECODE_ERROR, error=str(exc))
    return PacketOutcome(StepKind.DATA, blocks=tuple(blocks))


def run_packet_loop(
    container: DemuxedContainer,
    decoder: Decoder,
    track_id: int,
    series: AmplitudeSeries,
) -> DecodeReport:
    """Decode every packet of *track_id* into *series*."""
    report = DecodeReport()
    while True:
        outcome = next_outcome(container, decoder, track_id)

        if outcome.kind is StepKind.STOP:
            report.stop_reason = outcome.reason
            if outcome.reason == READ_ERROR:
                report.last_error = outcome.error
                logger.warning(f"Packet read error: {outcome.error}")
            break

        if outcome.kind is StepKind.SKIP:
            if outcome.reason == DECODE_ERROR:
                report.decode_errors += 1
                report.last_error = outcome.error
                logger.warning(f"Decode error: {outcome.error}")
            else:
                report.packets_skipped += 1
            continue

        for block in outcome.blocks:
            report.frames += series.extend(block)
        report.packets_decoded += 1

    for block in decoder.flush():
        report.frames += series.extend(block)
    return report
