"""
Resource types returned by the server.

All resources are frozen dataclasses built with ``Type.from_json(obj)``;
collections come back as `Records`.
"""

from .base import Resource
from .asset import AssetIdentifier
from .offer import Offer, PriceRatio
from .ledger import Ledger
from .transaction import Transaction
from .operation import (
    Operation,
    OperationDetails,
    CreateAccount,
    Payment,
    PathPayment,
    ManageOffer,
    CreatePassiveOffer,
    SetOptions,
    ChangeTrust,
    AllowTrust,
    AccountMerge,
    Inflation,
    ManageData,
)
from .effect import Effect
from .account import Account, Balance, Signer, Thresholds, Flags, DataValue
from .records import Records

__all__ = [
    "Resource",
    "AssetIdentifier",
    "Offer",
    "PriceRatio",
    "Ledger",
    "Transaction",
    "Operation",
    "OperationDetails",
    "CreateAccount",
    "Payment",
    "PathPayment",
    "ManageOffer",
    "CreatePassiveOffer",
    "SetOptions",
    "ChangeTrust",
    "AllowTrust",
    "AccountMerge",
    "Inflation",
    "ManageData",
    "Effect",
    "Account",
    "Balance",
    "Signer",
    "Thresholds",
    "Flags",
    "DataValue",
    "Records",
]
