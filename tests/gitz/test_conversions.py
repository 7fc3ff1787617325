"""Tests for the forward conversions between configuration snapshots."""

from hypothesis import given
from hypothesis import strategies as st

from gitz.config import conversions
from gitz.config.models import VERSION, AnyScopes, ListScopes, Ticket
from gitz.config.snapshots import v0_1, v0_2_dev_0, v0_2_dev_1, v0_2_dev_2, v0_2_dev_3


def _v0_1(**overrides):
    data = {
        "version": "0.1",
        "types": ["feat adds feature", "fix patches bug"],
        "scopes": ["a", "b"],
        "template": "Refs: {{ ticket }}",
        "ticket_prefixes": [""],
    }
    data.update(overrides)
    return v0_1.Config.model_validate(data)


class TestSplitTypeAndDoc:
    def test_splits_on_first_space(self):
        assert conversions.split_type_and_doc("feat adds feature") == ("feat", "adds feature")

    def test_strips_alignment_spaces(self):
        assert conversions.split_type_and_doc("fix       patches a bug  ") == ("fix", "patches a bug")

    def test_type_without_description(self):
        assert conversions.split_type_and_doc("chore") == ("chore", "")

    @given(
        name=st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=12),
        spaces=st.integers(min_value=1, max_value=8),
        doc=st.text(alphabet="abcdefghij ", max_size=30).map(str.strip),
    )
    def test_recovers_aligned_entries(self, name, spaces, doc):
        assert conversions.split_type_and_doc(name + " " * spaces + doc) == (name, doc)


class TestV0_1ToV0_2:
    def test_end_to_end_values(self):
        config = conversions.v0_1_to_v0_2(_v0_1())

        assert config.version == VERSION
        assert config.types == {"feat": "adds feature", "fix": "patches bug"}
        assert config.scopes == ListScopes(list=["a", "b"])
        assert config.ticket == Ticket(required=True, prefixes=[""])
        assert config.templates.commit == "Refs: {{ ticket }}"

    def test_type_order_is_kept(self):
        config = conversions.v0_1_to_v0_2(_v0_1(types=["z last", "a first", "m middle"]))
        assert list(config.types) == ["z", "a", "m"]

    def test_no_scopes(self):
        assert conversions.v0_1_to_v0_2(_v0_1(scopes=[])).scopes is None

    def test_no_ticket_prefixes(self):
        assert conversions.v0_1_to_v0_2(_v0_1(ticket_prefixes=[])).ticket is None


class TestDevelopmentChain:
    def _dev_0(self, **overrides):
        data = {
            "version": "0.2-dev.0",
            "types": {"feat": "adds feature"},
            "scopes": {"accept": "list", "list": ["a"]},
            "ticket": {"prefixes": ["", "GH-"]},
            "templates": {"commit": "Refs: #{{ ticket }}"},
        }
        data.update(overrides)
        return v0_2_dev_0.Config.model_validate(data)

    def test_dev_0_ticket_becomes_required(self):
        config = conversions.v0_2_dev_0_to_v0_2_dev_1(self._dev_0())

        assert isinstance(config, v0_2_dev_1.Config)
        assert config.version == v0_2_dev_1.VERSION
        assert config.ticket.required is True
        assert config.ticket.prefixes == ["", "GH-"]

    def test_dev_0_without_ticket_or_scopes(self):
        config = conversions.v0_2_dev_0_to_v0_2_dev_1(self._dev_0(ticket=None, scopes=None))

        assert config.ticket is None
        assert config.scopes is None

    def test_full_chain_reaches_current(self):
        dev_1 = conversions.v0_2_dev_0_to_v0_2_dev_1(self._dev_0())
        dev_2 = conversions.v0_2_dev_1_to_v0_2_dev_2(dev_1)
        dev_3 = conversions.v0_2_dev_2_to_v0_2_dev_3(dev_2)
        current = conversions.v0_2_dev_3_to_v0_2(dev_3)

        assert isinstance(dev_2, v0_2_dev_2.Config)
        assert isinstance(dev_3, v0_2_dev_3.Config)
        assert current.version == VERSION
        assert current.types == {"feat": "adds feature"}
        assert current.scopes == ListScopes(list=["a"])
        assert current.ticket == Ticket(required=True, prefixes=["", "GH-"])
        assert current.templates.commit == "Refs: #{{ ticket }}"

    def test_dev_3_any_scopes(self):
        dev_3 = v0_2_dev_3.Config.model_validate(
            {
                "version": "0.2-dev.3",
                "types": {"feat": "adds feature"},
                "scopes": {"accept": "any"},
                "templates": {"commit": "x"},
            }
        )
        assert conversions.v0_2_dev_3_to_v0_2(dev_3).scopes == AnyScopes()
