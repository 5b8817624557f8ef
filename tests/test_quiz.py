import pytest

from hanyu.study.quiz import QuizEngine, QuizState, QuizStateError

from conftest import make_candidate


def _fill(store, n):
    for i in range(n):
        store.add(make_candidate(f"字{i}"))


def _engine(store, rng, calls):
    return QuizEngine(store, on_complete=lambda: calls.append(1), rng=rng)


def _run_to_end(quiz):
    while quiz.state is QuizState.IN_PROGRESS:
        quiz.reveal()
        quiz.advance()


def test_queue_is_capped_at_ten_unique_members(word_store, rng):
    _fill(word_store, 15)
    quiz = _engine(word_store, rng, [])
    assert quiz.start()
    ids = [w.id for w in quiz.queue]
    assert len(ids) == 10
    assert len(set(ids)) == 10
    stored = {w.id for w in word_store.list()}
    assert set(ids) <= stored


def test_small_store_uses_every_word(word_store, rng):
    _fill(word_store, 3)
    quiz = _engine(word_store, rng, [])
    quiz.start()
    assert quiz.total == 3
    assert {w.id for w in quiz.queue} == {w.id for w in word_store.list()}


def test_empty_store_reports_empty(word_store, rng):
    quiz = _engine(word_store, rng, [])
    assert not quiz.start()
    assert quiz.empty
    assert quiz.state is QuizState.IDLE
    assert quiz.current is None


@pytest.mark.parametrize("n", [1, 5, 10])
def test_completing_a_run_records_exactly_once(word_store, rng, n):
    _fill(word_store, n)
    calls = []
    quiz = _engine(word_store, rng, calls)
    quiz.start()
    _run_to_end(quiz)
    assert quiz.state is QuizState.FINISHED
    assert quiz.completed_count == n
    assert calls == [1]


def test_reveal_is_idempotent_and_does_not_move(word_store, rng):
    _fill(word_store, 4)
    quiz = _engine(word_store, rng, [])
    quiz.start()
    first = quiz.current
    quiz.reveal()
    quiz.reveal()
    assert quiz.revealed
    assert quiz.position == 0
    assert quiz.current == first


def test_advance_resets_reveal(word_store, rng):
    _fill(word_store, 4)
    quiz = _engine(word_store, rng, [])
    quiz.start()
    quiz.reveal()
    quiz.advance()
    assert quiz.position == 1
    assert not quiz.revealed


def test_advance_requires_reveal(word_store, rng):
    _fill(word_store, 2)
    quiz = _engine(word_store, rng, [])
    quiz.start()
    with pytest.raises(QuizStateError):
        quiz.advance()


def test_actions_outside_a_run_are_rejected(word_store, rng):
    _fill(word_store, 1)
    quiz = _engine(word_store, rng, [])
    with pytest.raises(QuizStateError):
        quiz.reveal()
    quiz.start()
    _run_to_end(quiz)
    with pytest.raises(QuizStateError):
        quiz.advance()
    with pytest.raises(QuizStateError):
        quiz.start()


def test_retry_draws_a_fresh_run(word_store, rng):
    _fill(word_store, 12)
    calls = []
    quiz = _engine(word_store, rng, calls)
    quiz.start()
    _run_to_end(quiz)
    assert quiz.retry()
    assert quiz.state is QuizState.IN_PROGRESS
    assert quiz.position == 0
    assert not quiz.revealed
    assert quiz.total == 10
    _run_to_end(quiz)
    assert calls == [1, 1]


def test_every_word_can_lead_the_queue(word_store, rng):
    _fill(word_store, 3)
    quiz = _engine(word_store, rng, [])
    quiz.start()
    leaders = set()
    for _ in range(200):
        quiz.retry()
        leaders.add(quiz.current.simplified)
    assert leaders == {"字0", "字1", "字2"}
