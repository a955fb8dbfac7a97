from abc import ABC
from typing import Any


class BaseCustomException(Exception, ABC):
    """
    Base class for all custom exceptions.

    Parameters
    ----------
    message : str | None
        Human readable message, falls back to the default one
    data : Any
        Optional diagnostic payload rendered into the error envelope
    """

    def __init__(self, message: str | None = None, data: Any = None):
        self.message = message or self.get_default_message()
        self.data = data
        super().__init__(self.message)

    def get_default_message(self) -> str:
        """
        Return default error message.

        Returns
        -------
        str
            Default error message
        """
        return "An unexpected error occurred"

    def get_status_code(self) -> int:
        """
        Return HTTP status code for exception.

        Returns
        -------
        int
            HTTP status code
        """
        return 500


class BadRequestException(BaseCustomException):
    """Bad request exception (400)."""

    def get_status_code(self) -> int:
        return 400


class ServiceUnavailableException(BaseCustomException):
    """Service unavailable exception (503)."""

    def get_status_code(self) -> int:
        return 503


class ContractNotDeployedException(BadRequestException):
    """No contract code at the configured address, or the call reverted."""

    def get_default_message(self) -> str:
        return "Contract not found at the configured address"


class RPCTimeoutException(ServiceUnavailableException):
    """RPC call timed out after exhausting retries."""

    def get_default_message(self) -> str:
        return "RPC timeout. Please try again later."


class RPCUnreachableException(ServiceUnavailableException):
    """RPC endpoint could not be reached after exhausting retries."""

    def get_default_message(self) -> str:
        return "Unable to connect to blockchain RPC"


class BlockchainReadException(BaseCustomException):
    """Unclassified failure while reading chain data (500)."""

    def get_default_message(self) -> str:
        return "An error occurred while reading blockchain data"
