"""Address resolver: derives the watched account from the configured passphrase."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from dust_burner.crypto.keys import KeyDerivationError, address_from_public_key, keys_from_passphrase
from dust_burner.exceptions import InvalidPassphraseError
from dust_burner.models.chain import WatchedAccount
from dust_burner.utils.validation import mask_address


class AddressResolver:
    """Resolves a passphrase to a WatchedAccount for one network. Called once at boot."""

    def __init__(
        self,
        network_version: int,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._network_version = network_version
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def resolve(self, passphrase: str | None) -> WatchedAccount:
        """Derive address and public key.

        Raises:
            InvalidPassphraseError: If the passphrase is missing, blank or unusable.
        """
        if passphrase is None:
            raise InvalidPassphraseError("passphrase is not set")
        try:
            keys = keys_from_passphrase(passphrase)
            address = address_from_public_key(keys.public_key, self._network_version)
        except KeyDerivationError as e:
            raise InvalidPassphraseError(str(e)) from e

        self._logger.debug(
            "watched_address_resolved",
            wallet_masked=mask_address(address),
            network_version=self._network_version,
        )
        return WatchedAccount(
            address=address,
            public_key=keys.public_key_hex,
            passphrase=passphrase,
        )
