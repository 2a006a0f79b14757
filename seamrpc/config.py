"""
Configuration settings for seamrpc servers and clients
"""
import os
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ServerConfig:
    """Configuration for the dispatching server"""
    test_mode: bool = False  # Suppresses the JSON content type header
    batch_workers: int = 1  # >1 dispatches batch elements on a thread pool
    content_type: str = "application/json"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Create config from environment variables"""
        return cls(
            test_mode=os.getenv("SEAMRPC_ENV", "").upper() == "TEST",
            batch_workers=int(os.getenv("SEAMRPC_BATCH_WORKERS", "1")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "test_mode": self.test_mode,
            "batch_workers": self.batch_workers,
            "content_type": self.content_type,
        }


@dataclass
class ClientConfig:
    """Configuration for the calling client"""
    uri: str = "http://localhost:8080/rpc"
    transport: str = "http"  # http, zeromq
    timeout_ms: int = 5000

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create config from environment variables"""
        return cls(
            uri=os.getenv("SEAMRPC_URI", cls.uri),
            transport=os.getenv("SEAMRPC_TRANSPORT", cls.transport),
            timeout_ms=int(os.getenv("SEAMRPC_TIMEOUT_MS", str(cls.timeout_ms))),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "uri": self.uri,
            "transport": self.transport,
            "timeout_ms": self.timeout_ms,
        }
