import os
import threading
import unittest
from unittest import mock

from openai_llm_params.config.llm import (
    ENV_PROMPT_LANGUAGE,
    PROMPT_STRINGS,
    SYSTEM_PROMPT_RESOURCE_KEY,
)
from openai_llm_params.services.prompts import (
    default_system_prompt,
    localized_string,
    reset_default_system_prompt,
    set_default_system_prompt_provider,
)


class LocalizedStringTests(unittest.TestCase):
    def test_lookup_by_language(self):
        self.assertEqual(
            localized_string(SYSTEM_PROMPT_RESOURCE_KEY, "de"),
            PROMPT_STRINGS["de"][SYSTEM_PROMPT_RESOURCE_KEY],
        )

    def test_unknown_language_falls_back_to_english(self):
        with self.assertLogs("openai_llm_params.services.prompts", "WARNING"):
            value = localized_string(SYSTEM_PROMPT_RESOURCE_KEY, "xx")

        self.assertEqual(value, PROMPT_STRINGS["en"][SYSTEM_PROMPT_RESOURCE_KEY])

    def test_unknown_key_falls_back_to_key(self):
        self.assertEqual(localized_string("MISSING_KEY", "en"), "MISSING_KEY")

    def test_language_from_environment(self):
        with mock.patch.dict(os.environ, {ENV_PROMPT_LANGUAGE: "de"}):
            value = localized_string(SYSTEM_PROMPT_RESOURCE_KEY)

        self.assertEqual(value, PROMPT_STRINGS["de"][SYSTEM_PROMPT_RESOURCE_KEY])


class DefaultSystemPromptTests(unittest.TestCase):
    def tearDown(self):
        reset_default_system_prompt()

    def test_builtin_default_is_english_prompt(self):
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(ENV_PROMPT_LANGUAGE, None)
            reset_default_system_prompt()
            self.assertEqual(
                default_system_prompt(),
                PROMPT_STRINGS["en"][SYSTEM_PROMPT_RESOURCE_KEY],
            )

    def test_provider_runs_lazily_and_once(self):
        provider = mock.Mock(return_value="cached prompt")
        set_default_system_prompt_provider(provider)

        provider.assert_not_called()
        self.assertEqual(default_system_prompt(), "cached prompt")
        self.assertEqual(default_system_prompt(), "cached prompt")
        provider.assert_called_once_with()

    def test_provider_runs_once_across_threads(self):
        provider = mock.Mock(return_value="threaded prompt")
        set_default_system_prompt_provider(provider)
        results = []

        threads = [
            threading.Thread(target=lambda: results.append(default_system_prompt()))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(results, ["threaded prompt"] * 8)
        provider.assert_called_once_with()

    def test_setting_provider_drops_cached_value(self):
        set_default_system_prompt_provider(lambda: "first")
        self.assertEqual(default_system_prompt(), "first")

        set_default_system_prompt_provider(lambda: "second")
        self.assertEqual(default_system_prompt(), "second")


if __name__ == "__main__":
    unittest.main()
