"""Release signing domain: descriptor reading and resolution."""

from .errors import (
    MissingFieldError,
    PropertiesUnreadable,
    ReleaseSigningUnconfiguredError,
    SigningError,
)
from .intent import InvocationIntent
from .model import Configured, KeystoreDescriptor, Signing, SigningResolution, Unconfigured
from .properties import parse_properties, read_descriptor
from .resolver import resolve

__all__ = [
    "Configured",
    "InvocationIntent",
    "KeystoreDescriptor",
    "MissingFieldError",
    "PropertiesUnreadable",
    "ReleaseSigningUnconfiguredError",
    "Signing",
    "SigningError",
    "SigningResolution",
    "Unconfigured",
    "parse_properties",
    "read_descriptor",
    "resolve",
]
