from fastapi.testclient import TestClient

from restcore.services.transaction import TransactionState


def test_each_request_gets_its_own_context(client: TestClient) -> None:
    seen = []
    app = client.app
    original = app.state.session_factory

    def recording_factory():
        session = original()
        seen.append(session)
        return session

    app.state.session_factory = recording_factory

    client.get("/tags")
    client.get("/tags")

    assert len(seen) == 2
    assert seen[0] is not seen[1]


def test_transaction_state_defaults_to_not_atomic() -> None:
    state = TransactionState()

    assert state.is_atomic is False
    assert state.should_rollback is False
