"""Burn decision and emission services."""

from dust_burner.services.burning.burn_emitter import BurnEmissionResult, BurnEmitter
from dust_burner.services.burning.burn_engine import BurnEngine, EngineState, PendingBurn
from dust_burner.services.burning.dust_accumulator import (
    DUST_MEMO,
    BurnDecision,
    BurnKind,
    DustAccumulator,
    decide_without_dust,
)
from dust_burner.services.burning.nonce_sequencer import NonceSequencer
from dust_burner.services.burning.transfer_extractor import TransferExtractor

__all__ = [
    "DUST_MEMO",
    "BurnDecision",
    "BurnEmissionResult",
    "BurnEmitter",
    "BurnEngine",
    "BurnKind",
    "DustAccumulator",
    "EngineState",
    "NonceSequencer",
    "PendingBurn",
    "TransferExtractor",
    "decide_without_dust",
]
