"""
Sample Deploy Model
===================

A small model of the deploys the device is asked to sign, sufficient to
produce the raw blob of a test vector and to extract the elements shown
on screen.

Deploy Structure
----------------
    Deploy
    ├── header:  account, timestamp, ttl, gas price, body hash,
    │            dependencies, chain name
    ├── hash:    BLAKE2b-256 of the serialized header
    ├── payment: executable item paying for the execution
    ├── session: executable item doing the actual work
    └── approvals: signer public key and signature, one per signing key

Executable items carry named runtime arguments. Each argument is a CL
value: a serialized payload followed by its type tag.

Type Tags
---------
CL types and executable kinds use the tag numbers of the Casper
serialization format, so the blobs are laid out like real deploys.

Signing
-------
Ed25519 keys sign with `cryptography`, secp256k1 keys with `ecdsa`
(deterministic RFC 6979 nonces over SHA-256, low-S). Both signature
schemes are deterministic, so a seeded run reproduces its blobs byte
for byte.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterator, List, Optional, Tuple
import hashlib

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from ecdsa import SECP256k1, SigningKey
from ecdsa.util import sigencode_string_canonize

from ledger_vectors.errors import SampleError
from ledger_vectors.samples import bytesrepr


HASH_LENGTH = 32
SECRET_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64


def blake2b_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=HASH_LENGTH).digest()


# =============================================================================
# Enumeration Types
# =============================================================================

class CLType(IntEnum):
    """CL type tags."""
    BOOL = 0
    I32 = 1
    I64 = 2
    U8 = 3
    U32 = 4
    U64 = 5
    U128 = 6
    U256 = 7
    U512 = 8
    UNIT = 9
    STRING = 10
    KEY = 11
    UREF = 12
    OPTION = 13
    BYTE_ARRAY = 15
    PUBLIC_KEY = 22


class KeyAlgorithm(IntEnum):
    """Public key algorithm tags."""
    ED25519 = 1
    SECP256K1 = 2

    @property
    def key_length(self) -> int:
        return 32 if self is KeyAlgorithm.ED25519 else 33


class AccessRights(IntEnum):
    """URef access rights bits."""
    NONE = 0
    READ = 1
    WRITE = 2
    ADD = 4
    READ_ADD_WRITE = 7


class ExecutableKind(IntEnum):
    """Executable deploy item tags."""
    MODULE_BYTES = 0
    STORED_CONTRACT_BY_HASH = 1
    STORED_CONTRACT_BY_NAME = 2
    TRANSFER = 5


# =============================================================================
# Keys
# =============================================================================

@dataclass(frozen=True)
class PublicKey:
    algorithm: KeyAlgorithm
    raw: bytes

    def __post_init__(self):
        if len(self.raw) != self.algorithm.key_length:
            raise SampleError(
                f"{self.algorithm.name.lower()} public key must be "
                f"{self.algorithm.key_length} bytes, got {len(self.raw)}"
            )

    @classmethod
    def ed25519(cls, raw: bytes) -> "PublicKey":
        return cls(KeyAlgorithm.ED25519, bytes(raw))

    @classmethod
    def secp256k1(cls, raw: bytes) -> "PublicKey":
        return cls(KeyAlgorithm.SECP256K1, bytes(raw))

    def to_bytes(self) -> bytes:
        return bytesrepr.u8(self.algorithm) + self.raw

    def to_hex(self) -> str:
        """Tag-prefixed hex, e.g. '01' + 64 hex digits for ed25519."""
        return self.to_bytes().hex()

    def account_hash(self) -> "AccountHash":
        """Hash of the algorithm name, a zero byte and the raw key."""
        preimage = self.algorithm.name.lower().encode() + b"\x00" + self.raw
        return AccountHash(blake2b_256(preimage))


@dataclass(frozen=True)
class AccountHash:
    raw: bytes

    PREFIX = "account-hash-"

    def __post_init__(self):
        if len(self.raw) != HASH_LENGTH:
            raise SampleError(f"account hash must be {HASH_LENGTH} bytes")

    @classmethod
    def from_formatted_str(cls, text: str) -> "AccountHash":
        if not text.startswith(cls.PREFIX):
            raise SampleError(f"not a formatted account hash: {text!r}")
        try:
            return cls(bytes.fromhex(text[len(cls.PREFIX):]))
        except ValueError as e:
            raise SampleError(f"invalid account hash hex: {text!r}") from e

    def to_bytes(self) -> bytes:
        return self.raw

    def to_formatted_str(self) -> str:
        return f"{self.PREFIX}{self.raw.hex()}"


@dataclass(frozen=True)
class URef:
    addr: bytes
    access: AccessRights = AccessRights.READ_ADD_WRITE

    def __post_init__(self):
        if len(self.addr) != HASH_LENGTH:
            raise SampleError(f"URef address must be {HASH_LENGTH} bytes")

    def to_bytes(self) -> bytes:
        return self.addr + bytesrepr.u8(self.access)

    def to_formatted_str(self) -> str:
        return f"uref-{self.addr.hex()}-{int(self.access):03o}"


# Key variant tags
KEY_ACCOUNT_TAG = 0
KEY_UREF_TAG = 2


def key_to_bytes(key: Any) -> bytes:
    """Serialize an account hash or URef as a tagged Key."""
    if isinstance(key, AccountHash):
        return bytesrepr.u8(KEY_ACCOUNT_TAG) + key.to_bytes()
    if isinstance(key, URef):
        return bytesrepr.u8(KEY_UREF_TAG) + key.to_bytes()
    raise SampleError(f"unsupported key type: {type(key).__name__}")


# =============================================================================
# Signing
# =============================================================================

@dataclass(frozen=True)
class Signature:
    algorithm: KeyAlgorithm
    raw: bytes

    def __post_init__(self):
        if len(self.raw) != SIGNATURE_LENGTH:
            raise SampleError(f"signature must be {SIGNATURE_LENGTH} bytes, got {len(self.raw)}")

    def to_bytes(self) -> bytes:
        return bytesrepr.u8(self.algorithm) + self.raw


@dataclass(frozen=True)
class SecretKey:
    """
    A signing key.

    Attributes:
        algorithm: Signature scheme of the key
        raw: 32-byte secret (ed25519 seed or secp256k1 scalar)
    """
    algorithm: KeyAlgorithm
    raw: bytes

    def __post_init__(self):
        if len(self.raw) != SECRET_KEY_LENGTH:
            raise SampleError(
                f"secret key must be {SECRET_KEY_LENGTH} bytes, got {len(self.raw)}"
            )
        if self.algorithm == KeyAlgorithm.SECP256K1:
            scalar = int.from_bytes(self.raw, "big")
            if not 0 < scalar < SECP256k1.order:
                raise SampleError("secp256k1 secret key is out of range")

    @classmethod
    def ed25519(cls, raw: bytes) -> "SecretKey":
        return cls(KeyAlgorithm.ED25519, bytes(raw))

    @classmethod
    def secp256k1(cls, raw: bytes) -> "SecretKey":
        return cls(KeyAlgorithm.SECP256K1, bytes(raw))

    def public_key(self) -> PublicKey:
        if self.algorithm == KeyAlgorithm.ED25519:
            key = Ed25519PrivateKey.from_private_bytes(self.raw).public_key()
            return PublicKey.ed25519(key.public_bytes(Encoding.Raw, PublicFormat.Raw))
        key = SigningKey.from_string(self.raw, curve=SECP256k1)
        return PublicKey.secp256k1(key.get_verifying_key().to_string("compressed"))

    def sign(self, message: bytes) -> Signature:
        """Sign a message; secp256k1 signatures are r || s over SHA-256."""
        if self.algorithm == KeyAlgorithm.ED25519:
            raw = Ed25519PrivateKey.from_private_bytes(self.raw).sign(message)
        else:
            key = SigningKey.from_string(self.raw, curve=SECP256k1)
            raw = key.sign_deterministic(
                message,
                hashfunc=hashlib.sha256,
                sigencode=sigencode_string_canonize,
            )
        return Signature(self.algorithm, raw)


@dataclass(frozen=True)
class Approval:
    """A signer's public key and its signature of the deploy hash."""
    signer: PublicKey
    signature: Signature

    def to_bytes(self) -> bytes:
        return self.signer.to_bytes() + self.signature.to_bytes()


# =============================================================================
# CL Values and Runtime Arguments
# =============================================================================

_INT_ENCODERS = {
    CLType.I32: bytesrepr.i32,
    CLType.U8: bytesrepr.u8,
    CLType.U32: bytesrepr.u32,
    CLType.U64: bytesrepr.u64,
    CLType.U512: bytesrepr.u512,
}


@dataclass(frozen=True)
class CLValue:
    """
    A typed runtime value.

    Attributes:
        cl_type: Type tag of the value
        value: Python payload (int, str, bytes, key object or None)
        inner: Inner type for OPTION values
    """
    cl_type: CLType
    value: Any
    inner: Optional[CLType] = None

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def u512(cls, value: int) -> "CLValue":
        return cls(CLType.U512, value)

    @classmethod
    def u64(cls, value: int) -> "CLValue":
        return cls(CLType.U64, value)

    @classmethod
    def u32(cls, value: int) -> "CLValue":
        return cls(CLType.U32, value)

    @classmethod
    def string(cls, value: str) -> "CLValue":
        return cls(CLType.STRING, value)

    @classmethod
    def public_key(cls, value: PublicKey) -> "CLValue":
        return cls(CLType.PUBLIC_KEY, value)

    @classmethod
    def uref(cls, value: URef) -> "CLValue":
        return cls(CLType.UREF, value)

    @classmethod
    def key(cls, value: Any) -> "CLValue":
        return cls(CLType.KEY, value)

    @classmethod
    def byte_array(cls, value: bytes) -> "CLValue":
        return cls(CLType.BYTE_ARRAY, bytes(value))

    @classmethod
    def option_u64(cls, value: Optional[int]) -> "CLValue":
        return cls(CLType.OPTION, value, inner=CLType.U64)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def _encode_payload(self, cl_type: CLType, value: Any) -> bytes:
        if cl_type in _INT_ENCODERS:
            return _INT_ENCODERS[cl_type](value)
        if cl_type == CLType.BOOL:
            return bytesrepr.bool_(value)
        if cl_type == CLType.STRING:
            return bytesrepr.string(value)
        if cl_type == CLType.BYTE_ARRAY:
            return bytes(value)
        if cl_type in (CLType.PUBLIC_KEY, CLType.UREF):
            return value.to_bytes()
        if cl_type == CLType.KEY:
            return key_to_bytes(value)
        if cl_type == CLType.UNIT:
            return b""
        raise SampleError(f"cannot serialize CL type {cl_type.name}")

    def payload_bytes(self) -> bytes:
        if self.cl_type == CLType.OPTION:
            if self.inner is None:
                raise SampleError("OPTION value requires an inner type")
            if self.value is None:
                return bytesrepr.option(None)
            return bytesrepr.option(self._encode_payload(self.inner, self.value))
        return self._encode_payload(self.cl_type, self.value)

    def type_bytes(self) -> bytes:
        tag = bytesrepr.u8(self.cl_type)
        if self.cl_type == CLType.OPTION:
            return tag + bytesrepr.u8(self.inner)
        if self.cl_type == CLType.BYTE_ARRAY:
            return tag + bytesrepr.u32(len(self.value))
        return tag

    def to_bytes(self) -> bytes:
        return bytesrepr.byte_list(self.payload_bytes()) + self.type_bytes()


@dataclass
class RuntimeArgs:
    """Ordered, named runtime arguments."""
    items: List[Tuple[str, CLValue]] = field(default_factory=list)

    @classmethod
    def of(cls, **kwargs: CLValue) -> "RuntimeArgs":
        return cls(list(kwargs.items()))

    def insert(self, name: str, value: CLValue) -> None:
        self.items.append((name, value))

    def get(self, name: str) -> Optional[CLValue]:
        for arg_name, value in self.items:
            if arg_name == name:
                return value
        return None

    def names(self) -> List[str]:
        return [name for name, _ in self.items]

    def without(self, name: str) -> "RuntimeArgs":
        """Copy of the arguments with one argument removed."""
        return RuntimeArgs([item for item in self.items if item[0] != name])

    def replaced(self, name: str, value: CLValue) -> "RuntimeArgs":
        """Copy of the arguments with one argument's value swapped."""
        return RuntimeArgs([
            (arg_name, value if arg_name == name else arg_value)
            for arg_name, arg_value in self.items
        ])

    def to_bytes(self) -> bytes:
        return bytesrepr.list_of(
            bytesrepr.string(name) + value.to_bytes() for name, value in self.items
        )

    def __iter__(self) -> Iterator[Tuple[str, CLValue]]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


# =============================================================================
# Executable Items
# =============================================================================

@dataclass
class ExecutableItem:
    """
    Payment or session code of a deploy.

    Attributes:
        kind: Which executable variant this is
        args: Runtime arguments
        module_bytes: Wasm module (MODULE_BYTES only, may be empty)
        contract_hash: Stored contract hash (STORED_CONTRACT_BY_HASH only)
        contract_name: Stored contract name (STORED_CONTRACT_BY_NAME only)
        entry_point: Entry point of a stored contract
    """
    kind: ExecutableKind
    args: RuntimeArgs = field(default_factory=RuntimeArgs)
    module_bytes: bytes = b""
    contract_hash: Optional[bytes] = None
    contract_name: Optional[str] = None
    entry_point: Optional[str] = None

    @classmethod
    def from_module_bytes(cls, module: bytes, args: RuntimeArgs) -> "ExecutableItem":
        return cls(ExecutableKind.MODULE_BYTES, args, module_bytes=bytes(module))

    @classmethod
    def by_hash(cls, contract_hash: bytes, entry_point: str,
                args: RuntimeArgs) -> "ExecutableItem":
        if len(contract_hash) != HASH_LENGTH:
            raise SampleError(f"contract hash must be {HASH_LENGTH} bytes")
        return cls(ExecutableKind.STORED_CONTRACT_BY_HASH, args,
                   contract_hash=bytes(contract_hash), entry_point=entry_point)

    @classmethod
    def by_name(cls, name: str, entry_point: str,
                args: RuntimeArgs) -> "ExecutableItem":
        return cls(ExecutableKind.STORED_CONTRACT_BY_NAME, args,
                   contract_name=name, entry_point=entry_point)

    @classmethod
    def transfer(cls, args: RuntimeArgs) -> "ExecutableItem":
        return cls(ExecutableKind.TRANSFER, args)

    @property
    def is_system_payment(self) -> bool:
        """Empty module bytes: the standard payment code."""
        return self.kind == ExecutableKind.MODULE_BYTES and not self.module_bytes

    def to_bytes(self) -> bytes:
        out = bytesrepr.u8(self.kind)
        if self.kind == ExecutableKind.MODULE_BYTES:
            out += bytesrepr.byte_list(self.module_bytes)
        elif self.kind == ExecutableKind.STORED_CONTRACT_BY_HASH:
            out += self.contract_hash + bytesrepr.string(self.entry_point)
        elif self.kind == ExecutableKind.STORED_CONTRACT_BY_NAME:
            out += bytesrepr.string(self.contract_name) + bytesrepr.string(self.entry_point)
        return out + self.args.to_bytes()


# =============================================================================
# Deploy
# =============================================================================

@dataclass
class DeployHeader:
    account: PublicKey
    timestamp_ms: int
    ttl_ms: int
    gas_price: int
    body_hash: bytes
    dependencies: List[bytes]
    chain_name: str

    def to_bytes(self) -> bytes:
        return (
            self.account.to_bytes()
            + bytesrepr.u64(self.timestamp_ms)
            + bytesrepr.u64(self.ttl_ms)
            + bytesrepr.u64(self.gas_price)
            + self.body_hash
            + bytesrepr.list_of(self.dependencies)
            + bytesrepr.string(self.chain_name)
        )


@dataclass
class Deploy:
    header: DeployHeader
    hash: bytes
    payment: ExecutableItem
    session: ExecutableItem
    approvals: List[Approval] = field(default_factory=list)

    @classmethod
    def new(
        cls,
        timestamp_ms: int,
        ttl_ms: int,
        gas_price: int,
        dependencies: List[bytes],
        chain_name: str,
        payment: ExecutableItem,
        session: ExecutableItem,
        account: PublicKey,
    ) -> "Deploy":
        """Build a deploy, computing its body hash and deploy hash."""
        for dependency in dependencies:
            if len(dependency) != HASH_LENGTH:
                raise SampleError(f"dependency hash must be {HASH_LENGTH} bytes")
        body_hash = blake2b_256(payment.to_bytes() + session.to_bytes())
        header = DeployHeader(
            account=account,
            timestamp_ms=timestamp_ms,
            ttl_ms=ttl_ms,
            gas_price=gas_price,
            body_hash=body_hash,
            dependencies=list(dependencies),
            chain_name=chain_name,
        )
        return cls(header, blake2b_256(header.to_bytes()), payment, session)

    def sign(self, secret_key: SecretKey) -> Approval:
        """Add the key's approval of the deploy hash; signing twice is a no-op."""
        approval = Approval(secret_key.public_key(), secret_key.sign(self.hash))
        if approval not in self.approvals:
            self.approvals.append(approval)
        return approval

    def to_bytes(self) -> bytes:
        # Approvals form a set, encoded in byte order.
        approvals = sorted(approval.to_bytes() for approval in self.approvals)
        return (
            self.header.to_bytes()
            + self.hash
            + self.payment.to_bytes()
            + self.session.to_bytes()
            + bytesrepr.list_of(approvals)
        )
