from .client import TensorApiClient
from .models import AssetRecord, TensorApiError
from .rpc import SolanaRpcClient, SolanaRpcError
from .transactions import TensorTransactionBuilder, first_transaction

__all__ = [
    "AssetRecord",
    "SolanaRpcClient",
    "SolanaRpcError",
    "TensorApiClient",
    "TensorApiError",
    "TensorTransactionBuilder",
    "first_transaction",
]
