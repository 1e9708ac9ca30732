from __future__ import annotations

from models.candidate import PIPELINE_STAGES, CandidateStage
from pipelines.board import build_board, group_by_stage, stage_counts


def test_group_by_stage_includes_every_stage_in_order(make_record) -> None:
    records = [
        make_record(record_id="a", stage=CandidateStage.REVIEWED),
        make_record(record_id="b", stage=CandidateStage.APPLIED),
        make_record(record_id="c", stage=CandidateStage.REVIEWED),
    ]
    groups = group_by_stage(records)

    assert list(groups) == list(PIPELINE_STAGES)
    assert [record.id for record in groups[CandidateStage.REVIEWED]] == ["a", "c"]
    assert [record.id for record in groups[CandidateStage.APPLIED]] == ["b"]
    assert groups[CandidateStage.OFFER_SENT] == []
    assert sum(len(bucket) for bucket in groups.values()) == len(records)


def test_group_by_stage_empty_input() -> None:
    groups = group_by_stage([])
    assert set(groups) == set(CandidateStage)
    assert all(bucket == [] for bucket in groups.values())


def test_stage_counts_include_zeroes(make_record) -> None:
    counts = stage_counts([make_record(stage=CandidateStage.OFFER_SENT)])
    assert counts == {
        CandidateStage.APPLIED: 0,
        CandidateStage.REVIEWED: 0,
        CandidateStage.INTERVIEW_SCHEDULED: 0,
        CandidateStage.OFFER_SENT: 1,
    }


def test_build_board_cards_preview_two_skills(make_record) -> None:
    record = make_record(skills=["Python", "SQL", "Docker", "AWS"])
    board = build_board([record], "en")

    assert [column.label for column in board] == [
        "Applied",
        "Reviewed",
        "Interview Scheduled",
        "Offer Sent",
    ]
    card = board[0].cards[0]
    assert card.full_name == "Ada Lovelace"
    assert card.email == "ada@example.com"
    assert card.skills == ("Python", "SQL")
    assert card.more_skills == 2
    assert card.score is None
    assert board[0].count == 1


def test_build_board_localises_and_filters(make_record) -> None:
    board = build_board([make_record()], "de", stage="Applied")
    assert len(board) == 1
    assert board[0].label == "Beworben"
    assert board[0].cards[0].more_skills == 0
