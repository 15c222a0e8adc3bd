from __future__ import annotations

import pytest

from quickconnect.exceptions import DecodingError, InvalidUriSyntax
from quickconnect.models import Configuration, Fault, ParseOutcome


def test_configuration_copies_input_mapping():
    source = {"hostname": "example.com"}
    config = Configuration("ssh", source)
    source["hostname"] = "changed"
    assert config.get("hostname") == "example.com"


def test_configuration_equality_and_hash():
    a = Configuration("ssh", {"hostname": "h", "port": "22"})
    b = Configuration("ssh", {"hostname": "h", "port": "22"})
    assert a == b
    assert hash(a) == hash(b)
    assert a != Configuration("rdp", {"hostname": "h", "port": "22"})


def test_configuration_is_frozen():
    config = Configuration("ssh", {})
    with pytest.raises(AttributeError):
        config.protocol = "rdp"


def test_configuration_get_default():
    assert Configuration("ssh", {}).get("port", "22") == "22"


def test_configuration_to_dict():
    config = Configuration("ssh", {"hostname": "h"})
    assert config.to_dict() == {"protocol": "ssh", "parameters": {"hostname": "h"}}


def test_parse_outcome_failure_tags():
    client = ParseOutcome.failure(InvalidUriSyntax("bad"))
    internal = ParseOutcome.failure(DecodingError("broken"))
    assert client.fault is Fault.CLIENT
    assert internal.fault is Fault.INTERNAL
    assert internal.message == "broken"
    assert not client.ok and not internal.ok


def test_parse_outcome_unwrap_empty_raises():
    with pytest.raises(ValueError):
        ParseOutcome().unwrap()


def test_parse_outcome_unwrap_success():
    config = Configuration("ssh", {"hostname": "h"})
    assert ParseOutcome.success(config).unwrap() is config
