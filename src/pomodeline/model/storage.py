# -*- test-case-name: pomodeline.model.test.test_configuration -*-

from __future__ import annotations

from dataclasses import fields
from json import JSONDecodeError, dump, load
from os import makedirs, replace
from os.path import basename, dirname, exists, expanduser, join
from typing import TypeAlias, cast

from twisted.logger import Logger

from .boundaries import ConfigurationError
from .configuration import Configuration
from .schema import SavedConfiguration

log = Logger()


def configurationFromJSON(saved: SavedConfiguration) -> Configuration:
    """
    Build a L{Configuration} from its saved form; keys we don't know about are
    ignored and missing ones take their defaults.
    """
    if not isinstance(saved, dict):
        raise ConfigurationError("saved configuration must be a JSON object")
    known = {each.name for each in fields(Configuration)}
    unknown = set(saved) - known
    if unknown:
        log.warn("ignoring unknown configuration keys {keys}", keys=sorted(unknown))
    return Configuration(**{k: v for k, v in saved.items() if k in known})


def configurationToJSON(configuration: Configuration) -> SavedConfiguration:
    return {
        "workMinutes": configuration.workMinutes,
        "breakMinutes": configuration.breakMinutes,
        "longBreakMinutes": configuration.longBreakMinutes,
        "showSeconds": configuration.showSeconds,
        "promptForTask": configuration.promptForTask,
    }


JSON: TypeAlias = (
    "None | str | float | bool | dict[str, JSON] | list[JSON] | SavedConfiguration"
)


def saveToFile(filename: str, jsonObject: JSON) -> None:
    """
    Save the given JSON object to a file.
    """
    newp = join(dirname(filename), ".temporary-" + basename(filename) + ".new")
    with open(newp, "w") as new:
        dump(jsonObject, new)
    replace(newp, filename)


def loadFromFile(filename: str) -> JSON:
    with open(filename) as f:
        result: JSON = load(f)
        return result


defaultConfigurationFile = expanduser(
    "~/.config/pomodeline/configuration.json"
)


def loadConfiguration(filename: str = defaultConfigurationFile) -> Configuration:
    """
    Load the configuration from C{filename}, or the defaults if there is no
    such file.
    """
    if not exists(filename):
        return Configuration()
    try:
        loaded = loadFromFile(filename)
    except JSONDecodeError as jde:
        raise ConfigurationError(f"{filename} is not valid JSON: {jde}") from jde
    return configurationFromJSON(cast(SavedConfiguration, loaded))


def saveConfiguration(
    configuration: Configuration, filename: str = defaultConfigurationFile
) -> None:
    directory = dirname(filename)
    if directory:
        makedirs(directory, exist_ok=True)
    saveToFile(filename, configurationToJSON(configuration))
