"""Unit tests for technology keyword detection and emphasis."""

import pytest

from resume_roaster.contexts.intake.resume_data_structure import ExperienceEntry, ParsedResume
from resume_roaster.contexts.templating.tech_keywords import (
    emphasize_highlights,
    emphasize_tech_keywords,
    find_tech_keywords,
)


class TestFindTechKeywords:
    """Tests for find_tech_keywords function."""

    @pytest.mark.unit
    def test_vocabulary_order_and_canonical_spelling(self):
        assert find_tech_keywords("使用 Java 和 redis 构建，前端 React") == ["React", "Java", "Redis"]

    @pytest.mark.unit
    def test_each_keyword_once(self):
        assert find_tech_keywords("Redis 集群，redis 哨兵") == ["Redis"]

    @pytest.mark.unit
    def test_java_is_not_javascript(self):
        assert find_tech_keywords("JavaScript 开发") == ["JavaScript"]

    @pytest.mark.unit
    def test_go_is_not_google(self):
        assert find_tech_keywords("Google") == []

    @pytest.mark.unit
    def test_next_to_chinese_text(self):
        assert find_tech_keywords("熟悉Go语言") == ["Go"]

    @pytest.mark.unit
    def test_acronyms_are_case_sensitive(self):
        assert find_tech_keywords("the rest of it") == []
        assert find_tech_keywords("REST 接口") == ["REST"]

    @pytest.mark.unit
    def test_punctuated_names(self):
        assert find_tech_keywords("C++ 和 Node.js") == ["Node.js", "C++"]

    @pytest.mark.unit
    def test_empty(self):
        assert find_tech_keywords("") == []


class TestEmphasizeTechKeywords:
    """Tests for emphasize_tech_keywords function."""

    @pytest.mark.unit
    def test_wraps_keyword_as_written(self):
        assert emphasize_tech_keywords("用 redis 做缓存") == "用 **redis** 做缓存"

    @pytest.mark.unit
    def test_existing_bold_is_not_wrapped_again(self):
        assert emphasize_tech_keywords("**Redis** 与 MySQL") == "**Redis** 与 **MySQL**"

    @pytest.mark.unit
    def test_multi_word_keyword(self):
        assert emphasize_tech_keywords("基于 Spring Boot 开发") == "基于 **Spring Boot** 开发"

    @pytest.mark.unit
    def test_no_keywords(self):
        assert emphasize_tech_keywords("主导核心系统重构") == "主导核心系统重构"

    @pytest.mark.unit
    def test_empty(self):
        assert emphasize_tech_keywords("") == ""


@pytest.mark.unit
def test_emphasize_highlights_returns_new_record():
    job = ExperienceEntry(
        company="甲公司",
        role="工程师",
        period="2021.06 - 至今",
        highlights=("使用 Kafka 处理消息",),
    )
    resume = ParsedResume(experience=(job,))

    emphasized = emphasize_highlights(resume)

    assert emphasized.experience[0].highlights == ("使用 **Kafka** 处理消息",)
    assert resume.experience[0].highlights == ("使用 Kafka 处理消息",)
