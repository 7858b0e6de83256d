from interview.session import last_phrase


def test_comment_plus_question():
    assert last_phrase("Nice answer! What motivates you?") == "What motivates you?"


def test_trailing_fragment_without_punctuation():
    assert last_phrase("Great answer. Tell me more") == "Tell me more"


def test_single_sentence():
    assert last_phrase("Tell me about yourself.") == "Tell me about yourself."
    assert last_phrase("Hello") == "Hello"


def test_multiple_sentences_keeps_last():
    text = "Thanks. That was helpful. How did the team react?"
    assert last_phrase(text) == "How did the team react?"


def test_repeated_terminators_stay_with_their_sentence():
    assert last_phrase("Great story! What did you learn?!") == "What did you learn?!"
    assert last_phrase("Interesting. Tell me more...") == "Tell me more..."
    assert last_phrase("Wow!! How did that go?") == "How did that go?"
    assert last_phrase("That sounds hard!!") == "That sounds hard!!"
