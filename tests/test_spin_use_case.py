from unittest.mock import MagicMock

import pytest

from spin_engine.application.dto.spin_request import SpinRequest
from spin_engine.application.use_cases.spin_use_case import SpinUseCase
from spin_engine.domain.errors import InvalidBet, InvalidInput, NonceReuse, SeedNotFound, SettlementError
from spin_engine.domain.services.payout_resolver import PayoutResolver
from spin_engine.domain.services.symbol_selector import select_grid
from spin_engine.infrastructure.persistence.memory_seed_store import InMemorySeedStore
from spin_engine.infrastructure.settlement.simulated_settlement import SimulatedSettlement


@pytest.fixture
def store():
    return InMemorySeedStore()


@pytest.fixture
def settlement():
    return SimulatedSettlement()


@pytest.fixture
def use_case(store, settlement, default_table, paylines):
    return SpinUseCase(
        seed_store=store,
        settlement=settlement,
        symbol_table=default_table,
        paylines=paylines,
        payout_resolver=PayoutResolver(default_table, 5, 100)
    )


@pytest.fixture
def record(store):
    return store.create("player-1", client_seed="lucky")


def spin_request(record, bet=10, **overrides):
    data = {
        "player_id": record.player_id,
        "server_seed_hash": record.server_seed_hash,
        "client_seed": record.client_seed,
        "bet_amount": bet
    }
    data.update(overrides)
    return SpinRequest(**data)


def test_spin_is_reproducible_from_seed_pair(use_case, record, default_table):
    response = use_case.execute(spin_request(record))
    assert response.nonce == 0
    assert response.grid == select_grid(record.seed_pair(0), default_table).to_list()
    assert response.server_seed_hash == record.server_seed_hash
    assert "serverSeed" not in response.to_dict()["provablyFair"]


def test_consecutive_spins_use_disjoint_draw_windows(use_case, record):
    nonces = [use_case.execute(spin_request(record)).nonce for _ in range(3)]
    assert nonces == [0, 9, 18]


def test_outcome_is_settled(use_case, record):
    response = use_case.execute(spin_request(record))
    assert response.settlement["mode"] == "simulated"
    assert response.settlement["confirmed"] is True
    assert response.settlement["settlement_id"].startswith("sim-")


def test_invalid_bet_consumes_no_nonce(use_case, record, store):
    with pytest.raises(InvalidBet):
        use_case.execute(spin_request(record, bet=1))
    assert store.get_active("player-1").next_nonce == 0


def test_wrong_client_seed(use_case, record, store):
    with pytest.raises(InvalidInput):
        use_case.execute(spin_request(record, client_seed="someone-else"))
    assert store.get_active("player-1").next_nonce == 0


def test_reused_nonce(use_case, record):
    use_case.execute(spin_request(record, nonce=0))
    with pytest.raises(NonceReuse):
        use_case.execute(spin_request(record, nonce=0))


def test_unknown_player(use_case, record):
    with pytest.raises(SeedNotFound):
        use_case.execute(spin_request(record, player_id="player-2"))


def test_settlement_failure_propagates(store, default_table, paylines, record):
    settlement = MagicMock()
    settlement.mode = "onchain"
    settlement.settle.side_effect = SettlementError("gateway down")
    use_case = SpinUseCase(store, settlement, default_table, paylines, PayoutResolver(default_table))
    with pytest.raises(SettlementError):
        use_case.execute(spin_request(record))


def test_publisher_failure_does_not_fail_spin(store, settlement, default_table, paylines, record):
    publisher = MagicMock()
    publisher.publish_outcome.side_effect = RuntimeError("broker down")
    use_case = SpinUseCase(store, settlement, default_table, paylines, PayoutResolver(default_table), publisher)
    response = use_case.execute(spin_request(record), {"sentry-trace": "abc"})
    assert response.nonce == 0
    payload, headers = publisher.publish_outcome.call_args[0]
    assert payload["player_id"] == "player-1"
    assert payload["provably_fair"]["nonce"] == 0
    assert "server_seed" not in payload["provably_fair"]
    assert headers == {"sentry-trace": "abc"}


def test_published_outcome_carries_net_result(store, settlement, default_table, paylines, record):
    publisher = MagicMock()
    use_case = SpinUseCase(store, settlement, default_table, paylines, PayoutResolver(default_table), publisher)
    response = use_case.execute(spin_request(record, bet=20))
    payload = publisher.publish_outcome.call_args[0][0]
    assert payload["bet_amount"] == 20
    assert payload["net_result"] == response.total_win - 20
