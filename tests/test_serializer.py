"""
Tests for quizgrid.exporter.serializer

Формат строки: "name","text","A","B","C","D",<Answer 1/2>,"numbering","correct","partial","incorrect","mark",
"""

import pytest

from quizgrid.exporter.serializer import HEADER, QuestionSerializer
from quizgrid.models.exportable import ExportAnswer, ExportableQuestion


def make_question(fractions=(0, 0, 0, 1), single=True, **overrides) -> ExportableQuestion:
    texts = ["7", "10", "14", "15"]
    data = dict(
        type="multichoice",
        name="Q1",
        text="What comes next?",
        answers=[ExportAnswer(text=t, fraction=f) for t, f in zip(texts, fractions)],
        single=single,
        answer_numbering="123",
        correct_feedback="Your answer is correct.",
        partially_correct_feedback="Your answer is partially correct.",
        incorrect_feedback="Your answer is incorrect.",
        default_mark=1,
    )
    data.update(overrides)
    return ExportableQuestion(**data)


def test_header_is_emitted_once():
    serializer = QuestionSerializer()

    assert serializer.serialize_header_once() == HEADER
    assert serializer.serialize_header_once() == ""
    assert serializer.header_emitted is True


def test_header_text():
    assert HEADER == (
        "questionname,questiontext,A,B,C,D,Answer 1,Answer 2,answernumbering, "
        "correctfeedback, partiallycorrectfeedback, incorrectfeedback, defaultmark"
    )


def test_each_serializer_has_its_own_header_flag():
    first, second = QuestionSerializer(), QuestionSerializer()
    first.serialize_header_once()

    assert second.serialize_header_once() == HEADER


def test_single_answer_row():
    row = QuestionSerializer().serialize_row(make_question())

    assert row == (
        '"Q1","What comes next?","7","10","14","15",D, ,"123",'
        '"Your answer is correct.","Your answer is partially correct.",'
        '"Your answer is incorrect.","1",'
    )


def test_row_does_not_emit_header():
    serializer = QuestionSerializer()
    serializer.serialize_row(make_question())

    assert serializer.serialize_header_once() == HEADER


@pytest.mark.parametrize("index,letter", [(0, "A"), (1, "B"), (2, "C"), (3, "D")])
def test_single_answer_letter(index, letter):
    fractions = [0, 0, 0, 0]
    fractions[index] = 1
    row = QuestionSerializer().serialize_row(make_question(fractions=fractions))

    assert f'"15",{letter}, ,"123",' in row


def test_several_full_answers_last_one_wins():
    row = QuestionSerializer().serialize_row(make_question(fractions=(1, 0, 1, 0)))

    assert '"15",C, ,"123",' in row


def test_no_correct_answer_leaves_columns_empty():
    row = QuestionSerializer().serialize_row(make_question(fractions=(0, 0, 0, 0)))

    assert '"15","123",' in row


def test_multiselect_legacy_letters():
    row = QuestionSerializer().serialize_row(
        make_question(fractions=(0.5, 0, 0.5, 0), single=False)
    )

    assert '"15",A,C,"123",' in row


def test_multiselect_legacy_single_letter_keeps_trailing_comma():
    row = QuestionSerializer().serialize_row(
        make_question(fractions=(0, 0.5, 0, 0), single=False)
    )

    assert '"15",B,"123",' in row


def test_multiselect_aligned_pads_second_column():
    serializer = QuestionSerializer(legacy_multiselect=False)

    one = serializer.serialize_row(make_question(fractions=(0, 0.5, 0, 0), single=False))
    two = serializer.serialize_row(make_question(fractions=(0.5, 0, 0.5, 0), single=False))

    assert '"15",B, ,"123",' in one
    assert '"15",A,C,"123",' in two


def test_full_fraction_ignored_in_multiselect_mode():
    row = QuestionSerializer().serialize_row(make_question(fractions=(1, 0, 0, 0), single=False))

    assert '"15","123",' in row


def test_half_fraction_ignored_in_single_mode():
    row = QuestionSerializer().serialize_row(make_question(fractions=(0.5, 0, 0, 0)))

    assert '"15","123",' in row


def test_other_types_are_skipped():
    assert QuestionSerializer().serialize_row(make_question(type="truefalse")) == ""
    assert QuestionSerializer().serialize_row(make_question(type="category")) == ""


@pytest.mark.parametrize("count", [0, 3, 5])
def test_wrong_answer_count_is_skipped(count):
    answers = [ExportAnswer(text=str(i), fraction=0) for i in range(count)]

    assert QuestionSerializer().serialize_row(make_question(answers=answers)) == ""


def test_quotes_and_commas_are_not_escaped():
    row = QuestionSerializer().serialize_row(make_question(name='Say "hi"', text="a, b"))

    assert row.startswith('"Say "hi"","a, b",')


def test_fractional_default_mark():
    row = QuestionSerializer().serialize_row(make_question(default_mark=2.5))

    assert row.endswith('"2.5",')


def test_multiselect_aligned_keeps_two_columns(caplog):
    row = QuestionSerializer(legacy_multiselect=False).serialize_row(
        make_question(fractions=(0.5, 0.5, 0.5, 0), single=False)
    )

    assert '"15",A,B,"123",' in row
    assert "частично верных ответов 3" in caplog.text
