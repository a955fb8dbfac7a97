import os
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings using Pydantic Settings.

    Attributes
    ----------
    blockchain_rpc_url : str
        RPC endpoint of the chain the contract lives on
    contract_address : str
        Address of the deployed SimpleStorage contract
    chain_id : int
        Chain identifier (Avalanche Fuji by default)
    chain_name : str
        Human readable chain name used in error messages
    host : str
        Interface the HTTP server binds to
    port : int
        Port the HTTP server listens on
    rpc_timeout : float
        Per-call RPC timeout in seconds
    rpc_retry_count : int
        Maximum attempts for a transient RPC failure
    rpc_retry_delay : float
        Base delay between attempts in seconds (grows linearly)
    max_block_range : int
        Widest block span a single log query may cover
    max_page_size : int
        Upper bound for the events page size
    log_level : str
        Level of the service logger
    """

    blockchain_rpc_url: str = "https://rpc.ankr.com/avalanche_fuji"
    contract_address: str = "0x5f329c7c45318a8c7c42ef80b8f7ef55ddca9d5b"
    chain_id: int = 43113
    chain_name: str = "Avalanche Fuji"

    host: str = "0.0.0.0"
    port: int = 3001

    rpc_timeout: float = 30.0
    rpc_retry_count: int = 3
    rpc_retry_delay: float = 1.0

    max_block_range: int = 40000
    max_page_size: int = 100

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False
    )
