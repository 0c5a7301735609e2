import pytest

from services.fallback_responder import DEFAULT_ANSWER, DEMO_SOURCES, FallbackResponder


@pytest.fixture
def responder():
    return FallbackResponder()


@pytest.mark.parametrize("question,confidence", [
    ("What is the grace period?", 0.92),
    ("When is premium payment due?", 0.92),
    ("Is pregnancy covered?", 0.90),
    ("Maternity benefits?", 0.90),
    ("Are pre-existing diseases covered?", 0.95),
    ("What is the ICU cap?", 0.88),
    ("Is there a sub-limit on room rent?", 0.88),
    ("What is the NCD?", 0.93),
    ("Is there a no claim discount?", 0.93),
    ("Is cataract treated?", 0.87),
    ("Is knee surgery covered?", 0.87),
    ("Does it cover AYUSH treatment?", 0.85),
    ("Is alternative medicine covered?", 0.85),
])
def test_keyword_groups(responder, question, confidence):
    assert responder.match(question).confidence == confidence


def test_matching_is_case_insensitive(responder):
    assert responder.match("WHAT IS THE GRACE PERIOD?") == responder.match("what is the grace period?")


def test_first_group_in_priority_order_wins(responder):
    canned = responder.match("Does the grace period apply to maternity cover?")
    assert canned.confidence == 0.92
    assert canned.answer.startswith("A grace period of thirty days")


def test_unmatched_question_gets_deferral(responder):
    canned = responder.match("Who is the insurer's CEO?")
    assert canned == DEFAULT_ANSWER
    assert canned.confidence == 0.70


def test_respond_preserves_order_and_labels(responder):
    questions = ["Is pregnancy covered?", "Who owns the company?", "What is the grace period?"]
    results = responder.respond(questions)

    assert [r.question for r in results] == questions
    assert [r.confidence for r in results] == [0.90, 0.70, 0.92]
    for result in results:
        assert result.sources == list(DEMO_SOURCES)
        assert result.reasoning.startswith("Based on semantic analysis")


def test_respond_is_deterministic(responder):
    questions = ["What is the waiting period?", "Anything else?"]
    first = responder.respond(questions)
    second = responder.respond(questions)

    assert [(r.answer, r.confidence) for r in first] == [(r.answer, r.confidence) for r in second]
