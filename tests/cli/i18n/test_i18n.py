# tests/cli/i18n/test_i18n.py
"""
cli/i18n 다국어 메시지 테스트
"""

import pytest

from cli.i18n import DEFAULT_LANG, SUPPORTED_LANGS, get_lang, set_lang, t
from cli.i18n.messages import MESSAGES


@pytest.fixture(autouse=True)
def reset_lang():
    yield
    set_lang(DEFAULT_LANG)


class TestLanguageContext:
    """언어 컨텍스트 테스트"""

    def test_default_language(self):
        assert DEFAULT_LANG == "ko"
        assert SUPPORTED_LANGS == ("ko", "en")

    def test_set_lang(self):
        set_lang("en")

        assert get_lang() == "en"

    def test_invalid_language_falls_back(self):
        set_lang("fr")

        assert get_lang() == "ko"


class TestTranslate:
    """t() 함수 테스트"""

    def test_korean(self):
        assert t("cli.collect_done") == "수집 완료"

    def test_english_override(self):
        assert t("cli.collect_done", lang="en") == "Collection complete"

    def test_format(self):
        assert t("cli.output_written", lang="en", path="out.json") == "Output written to out.json"

    def test_missing_key(self):
        assert t("cli.no_such_key") == "cli.no_such_key"

    def test_missing_format_argument(self):
        """포맷 인자가 부족하면 원문 그대로"""
        assert "{regions}" in t("cli.regions_list", provider="ibm", other="x")


class TestMessageCompleteness:
    """메시지 누락 검사"""

    def test_all_messages_have_both_languages(self):
        for key, messages in MESSAGES.items():
            assert messages.get("ko"), key
            assert messages.get("en"), key

    def test_placeholders_match(self):
        import string

        formatter = string.Formatter()
        for key, messages in MESSAGES.items():
            ko = {name for _, name, _, _ in formatter.parse(messages["ko"]) if name}
            en = {name for _, name, _, _ in formatter.parse(messages["en"]) if name}
            assert ko == en, key
