"""
Test Vector Records
===================

A test vector pairs the raw bytes of a deploy with the exact screens the
device must show for it, in both display modes. The records are consumed
by the hardware-wallet test pipelines, so the JSON layout is fixed:

    {
      "index": 0,
      "name": "native_transfer-target_bytes-amount_min-...",
      "valid_regular": true,
      "valid_expert": true,
      "testnet": true,
      "blob": "01d2...",
      "output": ["0 | Txn hash [1/2] : ...", ...],
      "output_expert": ["0 | Txn hash [1/2] : ...", ...]
    }
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence
import json
import logging

from ledger_vectors.config import GeneratorConfig, get_default_config
from ledger_vectors.extract import parse_deploy
from ledger_vectors.layout.elements import Element
from ledger_vectors.layout.views import ViewMode, assemble
from ledger_vectors.samples.deploy import Deploy
from ledger_vectors.samples.generator import all_samples
from ledger_vectors.samples.sample import Sample

logger = logging.getLogger(__name__)


@dataclass
class TestVector:
    """
    One test-vector entry.

    Attributes:
        index: Position of the vector in the file (0-based)
        name: Sample label
        valid_regular: Whether the device accepts the deploy in regular mode
        valid_expert: Whether the device accepts the deploy in expert mode
        testnet: Network flag
        blob: Lowercase hex of the raw deploy bytes
        output: Regular-mode display lines
        output_expert: Expert-mode display lines
    """
    # Not a pytest test class despite the name.
    __test__ = False

    index: int
    name: str
    valid_regular: bool
    valid_expert: bool
    testnet: bool
    blob: str
    output: List[str] = field(default_factory=list)
    output_expert: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "name": self.name,
            "valid_regular": self.valid_regular,
            "valid_expert": self.valid_expert,
            "testnet": self.testnet,
            "blob": self.blob,
            "output": list(self.output),
            "output_expert": list(self.output_expert),
        }


def build_record(
    index: int,
    label: str,
    valid: bool,
    raw: bytes,
    elements: Sequence[Element],
    testnet: bool = True,
    valid_expert: Optional[bool] = None,
) -> TestVector:
    """
    Build a test vector from already-extracted elements.

    Both views are rendered from the same element sequence.

    Args:
        index: Record index
        label: Sample label
        valid: Upstream validity flag, used for both modes
        raw: Raw deploy bytes
        elements: Display elements in display order
        testnet: Network flag
        valid_expert: Separate expert-mode validity (defaults to `valid`)

    Raises:
        NameTooLongError: If an element name does not fit the name row
    """
    elements = tuple(elements)
    return TestVector(
        index=index,
        name=label,
        valid_regular=valid,
        valid_expert=valid if valid_expert is None else valid_expert,
        testnet=testnet,
        blob=raw.hex(),
        output=assemble(elements, ViewMode.REGULAR, label=label),
        output_expert=assemble(elements, ViewMode.EXPERT, label=label),
    )


def build_vector(
    index: int,
    sample: Sample[Deploy],
    config: Optional[GeneratorConfig] = None,
) -> TestVector:
    """Serialize, extract and render one deploy sample."""
    config = config or get_default_config()
    label, deploy, valid = sample.destructure()
    elements = parse_deploy(deploy, label=label)
    return build_record(
        index, label, valid, deploy.to_bytes(), elements, testnet=config.testnet,
    )


def build_vectors(
    samples: Iterable[Sample[Deploy]],
    config: Optional[GeneratorConfig] = None,
) -> List[TestVector]:
    """
    Build the vectors of a whole batch, indexed in sample order.

    Any error aborts the batch; no partial list is returned.
    """
    vectors = [build_vector(index, sample, config) for index, sample in enumerate(samples)]
    logger.info("Built %d test vectors", len(vectors))
    return vectors


def generate_vectors(config: Optional[GeneratorConfig] = None) -> List[TestVector]:
    """Generate samples and build the vectors for all of them."""
    config = config or get_default_config()
    return build_vectors(all_samples(config), config)


def vectors_to_json(vectors: Iterable[TestVector], indent: int = 2) -> str:
    """Serialize vectors as a pretty-printed JSON array."""
    return json.dumps([vector.to_dict() for vector in vectors], indent=indent,
                      ensure_ascii=False)
