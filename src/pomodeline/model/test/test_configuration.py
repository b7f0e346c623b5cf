from json import dump, load
from os.path import exists, join

from twisted.trial.unittest import SynchronousTestCase as TC

from ..boundaries import ConfigurationError
from ..configuration import Configuration
from ..storage import (
    configurationFromJSON,
    configurationToJSON,
    loadConfiguration,
    saveConfiguration,
)


class ConfigurationTests(TC):
    def test_defaults(self) -> None:
        configuration = Configuration()
        self.assertEqual(configuration.workMinutes, 25)
        self.assertEqual(configuration.breakMinutes, 5)
        self.assertEqual(configuration.longBreakMinutes, 30)
        self.assertIs(configuration.showSeconds, False)
        self.assertIs(configuration.promptForTask, True)
        self.assertEqual(configuration.workDuration, 1500.0)
        self.assertEqual(configuration.breakDuration, 300.0)
        self.assertEqual(configuration.longBreakDuration, 1800.0)

    def test_invalid(self) -> None:
        for bad in [
            dict(workMinutes=0),
            dict(breakMinutes=-5),
            dict(longBreakMinutes=2.5),
            dict(workMinutes=True),
            dict(showSeconds="yes"),
        ]:
            with self.assertRaises(ConfigurationError):
                Configuration(**bad)  # type:ignore[arg-type]

    def test_errorIsValueError(self) -> None:
        self.assertRaises(ValueError, Configuration, workMinutes=0)


class StorageTests(TC):
    def setUp(self) -> None:
        self.directory = self.mktemp()
        self.filename = join(self.directory, "nested", "configuration.json")

    def test_missingFile(self) -> None:
        self.assertEqual(loadConfiguration(self.filename), Configuration())

    def test_saveAndLoad(self) -> None:
        configuration = Configuration(workMinutes=50, showSeconds=True)
        saveConfiguration(configuration, self.filename)
        self.assertTrue(exists(self.filename))
        with open(self.filename) as f:
            self.assertEqual(load(f)["workMinutes"], 50)
        self.assertEqual(loadConfiguration(self.filename), configuration)

    def test_partialAndUnknownKeys(self) -> None:
        saved: dict[str, object] = {"breakMinutes": 10, "color": "red"}
        self.assertEqual(
            configurationFromJSON(saved),  # type:ignore[arg-type]
            Configuration(breakMinutes=10),
        )

    def test_toJSON(self) -> None:
        self.assertEqual(
            configurationToJSON(Configuration(promptForTask=False)),
            {
                "workMinutes": 25,
                "breakMinutes": 5,
                "longBreakMinutes": 30,
                "showSeconds": False,
                "promptForTask": False,
            },
        )

    def test_badJSON(self) -> None:
        saveConfiguration(Configuration(), self.filename)
        with open(self.filename, "w") as f:
            f.write("{not json")
        with self.assertRaises(ConfigurationError):
            loadConfiguration(self.filename)

    def test_notAnObject(self) -> None:
        saveConfiguration(Configuration(), self.filename)
        with open(self.filename, "w") as f:
            dump([1, 2], f)
        with self.assertRaises(ConfigurationError):
            loadConfiguration(self.filename)
