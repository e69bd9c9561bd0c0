"""Controlled vocabularies and inference keyword tables."""

from __future__ import annotations

from typing import Dict, Tuple

VALID_CATEGORIES: tuple[str, ...] = (
    "protocol",
    "networking",
    "consensus",
    "security",
    "storage",
    "smart-contracts",
    "tooling",
    "infrastructure",
    "governance",
    "economics",
)

# The first persona is the most general audience and the inference fallback.
VALID_PERSONAS: tuple[str, ...] = (
    "developer",
    "node-operator",
    "researcher",
    "community",
)

CONTENT_TYPES: tuple[str, ...] = (
    "guide",
    "tutorial",
    "reference",
    "concept",
)

DEFAULT_CONTENT_TYPE = "guide"
DEFAULT_CATEGORY = "protocol"

CATEGORY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "protocol": ("protocol", "specification", "message format", "handshake", "wire format", "rpc"),
    "networking": (
        "network",
        "networking",
        "peer",
        "peers",
        "p2p",
        "gossip",
        "libp2p",
        "bandwidth",
        "latency",
        "nat",
        "firewall",
        "port",
    ),
    "consensus": (
        "consensus",
        "finality",
        "fork choice",
        "validator set",
        "epoch",
        "slot",
        "leader election",
        "byzantine",
        "proof of stake",
    ),
    "security": (
        "security",
        "attack",
        "vulnerability",
        "audit",
        "encryption",
        "signature",
        "private key",
        "threat",
        "exploit",
    ),
    "storage": ("storage", "database", "disk", "snapshot", "pruning", "archive", "state sync"),
    "smart-contracts": (
        "smart contract",
        "smart contracts",
        "solidity",
        "contract",
        "abi",
        "deploy a contract",
        "evm",
        "wasm",
    ),
    "tooling": ("cli", "sdk", "toolkit", "plugin", "command line", "library", "debugger"),
    "infrastructure": (
        "docker",
        "kubernetes",
        "helm",
        "systemd",
        "monitoring",
        "prometheus",
        "grafana",
        "cloud",
        "server",
        "hardware requirements",
    ),
    "governance": ("governance", "proposal", "vote", "voting", "dao", "upgrade process"),
    "economics": ("token", "tokens", "fees", "gas", "rewards", "staking", "inflation", "tokenomics"),
}

PERSONA_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "developer": ("api", "sdk", "code", "function", "import", "npm", "build", "smart contract"),
    "node-operator": (
        "run a node",
        "node operator",
        "operator",
        "validator",
        "systemd",
        "docker",
        "hardware requirements",
        "sync",
        "upgrade your node",
    ),
    "researcher": ("research", "paper", "proof", "theorem", "formal", "analysis", "whitepaper"),
    "community": ("community", "forum", "governance", "vote", "ambassador", "event", "wallet"),
}

# Content type cues are regular expressions evaluated against the lowercased body.
CONTENT_TYPE_CUES: Dict[str, Tuple[str, ...]] = {
    "guide": (
        r"^\s*\d+\.\s+\S",
        r"\bstep\s+\d+\b",
        r"^#+\s*how to\b",
        r"\bprerequisites\b",
    ),
    "tutorial": (
        r"\bin this tutorial\b",
        r"\byou will (?:build|learn|create)\b",
        r"\bby the end of this\b",
    ),
    "reference": (
        r"^\|.*\|\s*$",
        r"^#+\s*(?:parameters|arguments|returns|options|fields|endpoints?)\b",
        r"\bsignature\b",
        r"^#+\s*api\b",
    ),
    "concept": (
        r"^#+\s*(?:overview|introduction|background)\b",
        r"\bwhat is\b",
        r"\bat a high level\b",
        r"\bthe idea behind\b",
    ),
}


__all__ = [
    "CATEGORY_KEYWORDS",
    "CONTENT_TYPE_CUES",
    "CONTENT_TYPES",
    "DEFAULT_CATEGORY",
    "DEFAULT_CONTENT_TYPE",
    "PERSONA_KEYWORDS",
    "VALID_CATEGORIES",
    "VALID_PERSONAS",
]
