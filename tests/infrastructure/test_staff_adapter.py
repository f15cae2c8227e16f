"""Tests for the staff adapter bridging MagicUser to WeaponUser."""

from unittest.mock import Mock

import pytest

from questpatterns.domain.base.exceptions import PreconditionViolationError
from questpatterns.domain.combatants import Caster, MagicUser, WeaponUser
from questpatterns.infrastructure.adapters import StaffAdapter
from questpatterns.infrastructure.narrative import BufferedNarrativeSink


class CountingCaster(MagicUser):
    """Caster double that records which spells were cast."""

    def __init__(self, name, sink):
        self.name = name
        self.sink = sink
        self.calls = []

    def cast_spell(self):
        self.calls.append("spell")

    def cast_shield(self):
        self.calls.append("shield")


class TestStaffAdapter:
    """Test cases for StaffAdapter."""

    def setup_method(self):
        """Set up test fixtures."""
        self.sink = BufferedNarrativeSink()
        self.myrin = Caster(
            name="Myrin", element="lightning", hp=100, mp=10, mag=10, defense=10, sink=self.sink
        )

    def test_is_a_weapon_user(self):
        adapter = StaffAdapter(self.myrin)
        assert isinstance(adapter, WeaponUser)
        assert adapter.caster is self.myrin
        assert adapter.name == "Myrin"

    def test_attack_narrates_channel_then_spell(self):
        StaffAdapter(self.myrin).perform_attack()

        assert self.sink.lines == [
            "Myrin uses a staff to cast a spell.",
            "Myrin casts lightning for 10 damage.",
        ]

    def test_guard_narrates_channel_then_shield(self):
        StaffAdapter(self.myrin).perform_guard()

        assert self.sink.lines == [
            "Myrin uses a staff to cast a shield.",
            "Myrin casts a shield, neutralizing the damage.",
        ]

    def test_attack_invokes_spell_exactly_once(self):
        caster = CountingCaster("Ilse", self.sink)
        adapter = StaffAdapter(caster)

        adapter.perform_attack()
        assert caster.calls == ["spell"]

        adapter.perform_guard()
        assert caster.calls == ["spell", "shield"]

    def test_delegation_with_mock(self):
        caster = Mock(spec=MagicUser)
        caster.name = "Myrin"
        adapter = StaffAdapter(caster, sink=self.sink)

        adapter.perform_attack()

        caster.cast_spell.assert_called_once_with()
        caster.cast_shield.assert_not_called()

    def test_custom_implement_and_sink(self):
        other_sink = BufferedNarrativeSink()
        StaffAdapter(self.myrin, implement="wand", sink=other_sink).perform_attack()

        assert other_sink.lines == ["Myrin uses a wand to cast a spell."]
        assert self.sink.lines == ["Myrin casts lightning for 10 damage."]

    def test_adapter_does_not_own_caster(self):
        adapter = StaffAdapter(self.myrin)
        del adapter
        self.myrin.cast_spell()
        assert self.sink.lines == ["Myrin casts lightning for 10 damage."]

    def test_none_caster_rejected(self):
        with pytest.raises(PreconditionViolationError) as exc:
            StaffAdapter(None)
        assert exc.value.argument == "caster"

    def test_non_magic_user_rejected(self):
        with pytest.raises(PreconditionViolationError):
            StaffAdapter(object())

    def test_caster_without_sink_needs_explicit_sink(self):
        caster = Mock(spec=MagicUser)
        caster.name = "Myrin"
        caster.sink = None

        with pytest.raises(PreconditionViolationError) as exc:
            StaffAdapter(caster)
        assert exc.value.argument == "sink"
