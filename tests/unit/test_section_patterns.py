"""Unit tests for section header classification and Markdown stripping."""

import pytest

from resume_roaster.contexts.intake.section_patterns import (
    SECTION_TAGS,
    detect_section,
    normalize_header_text,
    strip_heading_markers,
    strip_markdown,
)


class TestStripMarkdown:
    """Tests for strip_markdown function."""

    @pytest.mark.unit
    def test_bold_and_italic(self):
        assert strip_markdown("**粗体** 和 *斜体*") == "粗体 和 斜体"

    @pytest.mark.unit
    def test_cjk_bracket_emphasis(self):
        assert strip_markdown("【工作经历】") == "工作经历"

    @pytest.mark.unit
    def test_square_brackets_and_code(self):
        assert strip_markdown("[Spring] `Boot`") == "Spring Boot"

    @pytest.mark.unit
    def test_trims_whitespace(self):
        assert strip_markdown("   Java  ") == "Java"

    @pytest.mark.unit
    def test_heading_markers_survive(self):
        """Heading markers are handled by strip_heading_markers, not here."""
        assert strip_markdown("## Skills") == "## Skills"


@pytest.mark.unit
def test_strip_heading_markers():
    assert strip_heading_markers("## Work Experience") == "Work Experience"
    assert strip_heading_markers("###### 技能") == "技能"
    assert strip_heading_markers("没有标题标记") == "没有标题标记"


@pytest.mark.unit
def test_normalize_header_text_lowercases_and_strips():
    assert normalize_header_text("## **Skills**") == "skills"


class TestDetectSection:
    """Tests for detect_section function."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line",
        ["工作经历", "工作经验", "**工作经历**", "## Work Experience", "【工作经验】", "EMPLOYMENT"],
    )
    def test_experience_headers(self, line):
        assert detect_section(line) == "experience"

    @pytest.mark.unit
    @pytest.mark.parametrize("line", ["教育背景", "## Education", "学历背景", "学位背景"])
    def test_education_headers(self, line):
        assert detect_section(line) == "education"

    @pytest.mark.unit
    @pytest.mark.parametrize("line", ["专业技能", "技能", "Skills", "技术栈"])
    def test_skills_headers(self, line):
        assert detect_section(line) == "skills"

    @pytest.mark.unit
    @pytest.mark.parametrize("line", ["个人总结", "个人简结", "自我评价", "个人简介", "Summary", "About Me"])
    def test_summary_headers(self, line):
        assert detect_section(line) == "summary"

    @pytest.mark.unit
    @pytest.mark.parametrize("line", ["项目经历", "## Projects", "**项目**"])
    def test_projects_headers(self, line):
        assert detect_section(line) == "projects"

    @pytest.mark.unit
    def test_first_matching_group_wins(self):
        """Experience is checked before projects."""
        assert detect_section("Project Experience") == "experience"

    @pytest.mark.unit
    def test_header_with_period_is_still_a_header(self):
        assert detect_section("工作经历 2020-2022") == "experience"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line",
        ["张三", "字节跳动 | 高级工程师 | 2021.06 - 至今", "- 主导核心系统重构", "", "**"],
    )
    def test_body_lines_are_not_headers(self, line):
        assert detect_section(line) is None

    @pytest.mark.unit
    def test_tags_are_known(self):
        assert set(SECTION_TAGS) == {"experience", "education", "skills", "summary", "projects"}
