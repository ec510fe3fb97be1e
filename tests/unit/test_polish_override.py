"""Unit tests for the polished highlight override."""

import pytest

from resume_roaster.contexts.intake.resume_data_structure import ExperienceEntry, ParsedResume
from resume_roaster.contexts.templating.polish_override import (
    MAX_HIGHLIGHTS,
    apply_polished_highlights,
    extract_polished_highlights,
)

POLISHED = """张三 - 后端工程师
- 主导了支付系统重构项目上线
短
普通的一行文字但是没有标记
系统性能提升 50% 以上并稳定运行
"""


def make_resume():
    return ParsedResume(
        name="张三",
        experience=(
            ExperienceEntry(
                company="甲公司",
                role="工程师",
                period="2021.06 - 至今",
                highlights=("原始亮点一", "原始亮点二"),
            ),
            ExperienceEntry(
                company="乙公司",
                role="工程师",
                period="2019.01 - 2021.05",
                highlights=("乙公司亮点",),
            ),
        ),
    )


class TestExtractPolishedHighlights:
    """Tests for extract_polished_highlights function."""

    @pytest.mark.unit
    def test_picks_bullets_and_achievement_lines(self):
        assert extract_polished_highlights(POLISHED) == [
            "主导了支付系统重构项目上线",
            "系统性能提升 50% 以上并稳定运行",
        ]

    @pytest.mark.unit
    def test_length_bounds_are_exclusive(self):
        assert extract_polished_highlights("- 负责一二三四五六") == []
        assert extract_polished_highlights("- 负责一二三四五六七") == ["负责一二三四五六七"]

    @pytest.mark.unit
    def test_overlong_lines_are_skipped(self):
        assert extract_polished_highlights("- " + "优化" * 100) == []

    @pytest.mark.unit
    def test_capped(self):
        polished = "\n".join(f"- 负责第 {i} 号模块的开发与维护" for i in range(10))
        highlights = extract_polished_highlights(polished)

        assert len(highlights) == MAX_HIGHLIGHTS
        assert highlights[0] == "负责第 0 号模块的开发与维护"

    @pytest.mark.unit
    def test_round_bullet(self):
        assert extract_polished_highlights("• 优化查询使响应时间减半") == ["优化查询使响应时间减半"]

    @pytest.mark.unit
    def test_empty(self):
        assert extract_polished_highlights("") == []


class TestApplyPolishedHighlights:
    """Tests for apply_polished_highlights function."""

    @pytest.mark.unit
    def test_replaces_first_job_only(self):
        resume = make_resume()
        polished = apply_polished_highlights(resume, POLISHED)

        assert polished.experience[0].highlights == (
            "主导了支付系统重构项目上线",
            "系统性能提升 50% 以上并稳定运行",
        )
        assert polished.experience[0].company == "甲公司"
        assert polished.experience[1] == resume.experience[1]

    @pytest.mark.unit
    def test_original_is_untouched(self):
        resume = make_resume()
        apply_polished_highlights(resume, POLISHED)

        assert resume.experience[0].highlights == ("原始亮点一", "原始亮点二")

    @pytest.mark.unit
    def test_no_qualifying_lines_returns_same_record(self):
        resume = make_resume()
        assert apply_polished_highlights(resume, "短\n没有标记") is resume

    @pytest.mark.unit
    def test_no_experience_returns_same_record(self):
        resume = ParsedResume()
        assert apply_polished_highlights(resume, POLISHED) is resume
