"""Tests for the access gate and the entity registry it consults."""

import pytest

from autorotate.core.settings import settings
from autorotate.services.access import AccessGate
from autorotate.services.errors import (
    EntityNotFoundError,
    NotAdministratorError,
    NotApprovedOrOwnerError,
)
from autorotate.services.registry import EntityRegistry, OwnershipRegistry
from tests.conftest import ADMIN, ALICE, BOB, CAROL


@pytest.fixture()
def gate(db_session, registry) -> AccessGate:
    return AccessGate(db_session, registry)


class TestAdministrator:
    """Single-administrator predicate and handover."""

    def test_configured_administrator_is_the_initial_one(self, gate) -> None:
        assert settings.administrator == ADMIN
        assert gate.administrator() == ADMIN
        assert gate.is_administrator(ADMIN) is True

    @pytest.mark.parametrize("caller", [ALICE, "", None, "ADMIN"])
    def test_anyone_else_is_not_administrator(self, gate, caller) -> None:
        assert gate.is_administrator(caller) is False
        with pytest.raises(NotAdministratorError):
            gate.require_administrator(caller)

    def test_transfer_revokes_previous_administrator(self, gate) -> None:
        gate.transfer_administration(ADMIN, ALICE)

        assert gate.administrator() == ALICE
        assert gate.is_administrator(ALICE) is True
        assert gate.is_administrator(ADMIN) is False

        # The old administrator can no longer hand it back.
        with pytest.raises(NotAdministratorError):
            gate.transfer_administration(ADMIN, ADMIN)
        gate.transfer_administration(ALICE, BOB)
        assert gate.administrator() == BOB

    def test_only_administrator_can_transfer(self, gate) -> None:
        with pytest.raises(NotAdministratorError):
            gate.transfer_administration(ALICE, ALICE)
        assert gate.administrator() == ADMIN

    def test_transfer_to_empty_identity_is_rejected(self, gate) -> None:
        with pytest.raises(ValueError):
            gate.transfer_administration(ADMIN, "  ")
        assert gate.administrator() == ADMIN

    def test_seed_persists_configured_administrator_once(self, gate) -> None:
        assert gate.seed_administrator() is True
        assert gate.seed_administrator() is False
        gate.transfer_administration(ADMIN, CAROL)
        assert gate.seed_administrator() is False
        assert gate.administrator() == CAROL


class TestOwnerOrApproved:
    """Owner-or-approved predicate backed by the registry."""

    def test_registry_satisfies_protocol(self, registry) -> None:
        assert isinstance(registry, OwnershipRegistry)

    def test_owner_and_approved_delegate_pass(self, gate, registry, alice_entity) -> None:
        registry.approve(ALICE, BOB, alice_entity)

        assert gate.is_owner_or_approved(ALICE, alice_entity) is True
        assert gate.is_owner_or_approved(BOB, alice_entity) is True
        assert gate.is_owner_or_approved(CAROL, alice_entity) is False
        assert gate.is_owner_or_approved(ADMIN, alice_entity) is False
        with pytest.raises(NotApprovedOrOwnerError):
            gate.require_owner_or_approved(CAROL, alice_entity)

    def test_unminted_entity_has_no_controller(self, gate) -> None:
        assert gate.is_owner_or_approved(ALICE, 99) is False
        assert gate.is_owner_or_approved(None, 99) is False

    def test_transfer_moves_rights_immediately(self, gate, registry, alice_entity) -> None:
        registry.approve(ALICE, CAROL, alice_entity)
        registry.transfer(ALICE, BOB, alice_entity)

        assert gate.is_owner_or_approved(BOB, alice_entity) is True
        assert gate.is_owner_or_approved(ALICE, alice_entity) is False
        # Approval does not survive a transfer.
        assert gate.is_owner_or_approved(CAROL, alice_entity) is False

    def test_ownership_is_read_on_every_check(self, db_session) -> None:
        class CountingRegistry:
            def __init__(self) -> None:
                self.owner = ALICE
                self.calls = 0

            def owner_of(self, entity_id):
                self.calls += 1
                return self.owner

            def approved_delegate_of(self, entity_id):
                return None

        counting = CountingRegistry()
        gate = AccessGate(db_session, counting)

        assert gate.is_owner_or_approved(ALICE, 0) is True
        counting.owner = BOB
        assert gate.is_owner_or_approved(ALICE, 0) is False
        assert gate.is_owner_or_approved(BOB, 0) is True
        assert counting.calls == 3


class TestEntityRegistry:
    """Mint, approve and transfer semantics."""

    def test_mint_issues_sequential_ids(self, registry: EntityRegistry) -> None:
        assert registry.mint(ALICE) == 0
        assert registry.mint(ALICE) == 1
        assert registry.mint(BOB) == 2
        assert registry.owner_of(0) == ALICE
        assert registry.owner_of(1) == ALICE
        assert registry.balance_of(ALICE) == 2
        assert registry.balance_of(BOB) == 1
        assert registry.total_supply() == 3

    def test_unminted_entity_reads_as_none(self, registry) -> None:
        assert registry.owner_of(5) is None
        assert registry.approved_delegate_of(5) is None

    def test_unstorable_ids_were_never_minted(self, registry) -> None:
        assert registry.owner_of(2**64) is None
        assert registry.approved_delegate_of(-1) is None
        with pytest.raises(EntityNotFoundError):
            registry.transfer(ALICE, BOB, 2**64)

    def test_only_owner_can_approve(self, registry, alice_entity) -> None:
        with pytest.raises(NotApprovedOrOwnerError):
            registry.approve(BOB, BOB, alice_entity)
        registry.approve(ALICE, BOB, alice_entity)
        assert registry.approved_delegate_of(alice_entity) == BOB

        # A delegate cannot re-delegate.
        with pytest.raises(NotApprovedOrOwnerError):
            registry.approve(BOB, CAROL, alice_entity)

        registry.approve(ALICE, None, alice_entity)
        assert registry.approved_delegate_of(alice_entity) is None

    def test_approved_delegate_can_transfer(self, registry, alice_entity) -> None:
        registry.approve(ALICE, BOB, alice_entity)
        registry.transfer(BOB, CAROL, alice_entity)
        assert registry.owner_of(alice_entity) == CAROL
        assert registry.approved_delegate_of(alice_entity) is None

    def test_stranger_cannot_transfer(self, registry, alice_entity) -> None:
        with pytest.raises(NotApprovedOrOwnerError):
            registry.transfer(BOB, BOB, alice_entity)
        assert registry.owner_of(alice_entity) == ALICE

    def test_mutating_unminted_entity_fails(self, registry) -> None:
        with pytest.raises(EntityNotFoundError):
            registry.approve(ALICE, BOB, 7)
        with pytest.raises(EntityNotFoundError):
            registry.transfer(ALICE, BOB, 7)
