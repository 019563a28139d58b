"""Key derivation and transaction building."""

from dust_burner.crypto.keys import (
    KeyDerivationError,
    KeyPair,
    address_from_passphrase,
    address_from_public_key,
    keys_from_passphrase,
)
from dust_burner.crypto.transaction_builder import (
    BurnTransactionBuilder,
    TransactionBuildError,
    TransactionBuilderFactory,
    canonical_json_serializer,
)

__all__ = [
    "BurnTransactionBuilder",
    "KeyDerivationError",
    "KeyPair",
    "TransactionBuildError",
    "TransactionBuilderFactory",
    "address_from_passphrase",
    "address_from_public_key",
    "canonical_json_serializer",
    "keys_from_passphrase",
]
