import optparse
import unittest
from unittest.mock import patch

from contextcolor.config import Config, build_config, get_defaults
from contextcolor.hashing import UnknownMethod
from contextcolor.palette import UnknownPalette


def make_opts(**kw):
    defaults = {
        "command": None,
        "exclude": None,
        "no_default_excludes": False,
        "method": None,
        "palette": None,
        "background": False,
        "id_only": False,
        "prompt": False,
        "debug": False,
        "color": None,
    }
    defaults.update(kw)
    return optparse.Values(defaults)


class TestBuildConfig(unittest.TestCase):
    def test_defaults(self):
        config = build_config(make_opts(), environ={})
        self.assertEqual(config, Config(
            command="whoami; hostname",
            default_excludes=("0,7,15",),
            excludes=(),
            method="sum",
            palette="tput",
            background=False,
            id_only=False,
            prompt=False,
            debug=False,
            color=None,
        ))

    def test_record_is_immutable(self):
        config = build_config(make_opts(), environ={})
        with self.assertRaises(AttributeError):
            config.method = "digest"

    def test_user_excludes_kept_apart_from_defaults(self):
        config = build_config(make_opts(exclude=["3", "4,5"]), environ={})
        self.assertEqual(config.default_excludes, ("0,7,15",))
        self.assertEqual(config.excludes, ("3", "4,5"))

    def test_no_default_excludes(self):
        config = build_config(make_opts(exclude=["3"], no_default_excludes=True), environ={})
        self.assertEqual(config.default_excludes, ())
        self.assertEqual(config.excludes, ("3",))

    def test_environment_overrides_defaults(self):
        environ = {
            "CONTEXT_COLOR_COMMAND": "id -un",
            "CONTEXT_COLOR_EXCLUDE": "1,2",
            "CONTEXT_COLOR_METHOD": "digest",
            "CONTEXT_COLOR_PALETTE": "ansi",
        }
        config = build_config(make_opts(), environ=environ)
        self.assertEqual(config.command, "id -un")
        self.assertEqual(config.default_excludes, ("1,2",))
        self.assertEqual(config.excludes, ())
        self.assertEqual(config.method, "digest")
        self.assertEqual(config.palette, "ansi")

    def test_options_win_over_environment(self):
        environ = {"CONTEXT_COLOR_COMMAND": "id -un", "CONTEXT_COLOR_METHOD": "digest"}
        config = build_config(make_opts(command="pwd", method="sum"), environ=environ)
        self.assertEqual(config.command, "pwd")
        self.assertEqual(config.method, "sum")

    def test_empty_environment_values_ignored(self):
        defaults = get_defaults({"CONTEXT_COLOR_COMMAND": ""})
        self.assertEqual(defaults["command"], "whoami; hostname")

    def test_bad_method_from_environment(self):
        with self.assertRaises(UnknownMethod):
            build_config(make_opts(), environ={"CONTEXT_COLOR_METHOD": "sha1"})

    def test_bad_palette(self):
        with self.assertRaises(UnknownPalette):
            build_config(make_opts(palette="curses"), environ={})

    def test_names_checked_without_building_a_palette(self):
        with patch("contextcolor.palette.get_palette") as get_palette:
            build_config(make_opts(palette="ansi"), environ={})
        self.assertFalse(get_palette.called)

    def test_toggles_and_forced_color(self):
        config = build_config(make_opts(background=True, id_only=True, prompt=True,
                                        debug=True, color="5"), environ={})
        self.assertTrue(config.background)
        self.assertTrue(config.id_only)
        self.assertTrue(config.prompt)
        self.assertTrue(config.debug)
        self.assertEqual(config.color, "5")


if __name__ == "__main__":
    unittest.main(verbosity=2)
