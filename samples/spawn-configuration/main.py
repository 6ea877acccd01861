"""Sample demonstrating worker flag bindings.

Any class can expose worker flags. Marking an attribute as a worker flag is
a detail of its annotation, so existing properties can become flags (or
stop being flags) without restructuring the class.
"""

import logging
from enum import Enum
from typing import Annotated

from workerflags import WorkerFlag, WorkerFlagsUpdater, parse_csv


class Difficulty(Enum):
    EASY = "easy"
    HARD = "hard"


class SpawnConfiguration:
    spawn_vertical_offset: Annotated[int, WorkerFlag("spawn_z_offset", 0)] = 0
    density_check_max: Annotated[int, WorkerFlag("density_check_maximum", 20)] = 20
    density_check_distance: Annotated[
        int, WorkerFlag("density_check_distance", 300)
    ] = 300
    difficulty: Annotated[Difficulty, WorkerFlag("difficulty", Difficulty.EASY)] = (
        Difficulty.EASY
    )
    hidden_quests: Annotated[list, WorkerFlag("hidden_quests_csv", [])] = []


class Dispatcher:
    """Stand-in for whatever delivers flag updates to the process."""

    def __init__(self):
        self._callbacks = []

    def on_flag_update(self, callback):
        self._callbacks.append(callback)

    def flag_update(self, name, value=None):
        for callback in self._callbacks:
            callback(name, value)


def main() -> SpawnConfiguration:
    dispatcher = Dispatcher()
    spawn_config = SpawnConfiguration()

    flags = (
        WorkerFlagsUpdater()
        # list has no type parser, so its name parser must exist before register
        .set_parser_for_name("hidden_quests_csv", parse_csv)
        .register(spawn_config)
    )

    # register the callback before you forget
    dispatcher.on_flag_update(flags.apply_update)

    dispatcher.flag_update("spawn_z_offset", "150")
    dispatcher.flag_update("difficulty", "HARD")
    dispatcher.flag_update("hidden_quests_csv", "q1,q7,q9")
    dispatcher.flag_update("density_check_maximum")
    dispatcher.flag_update("some_other_workers_flag", "1")

    return spawn_config


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    config = main()
    print(f"spawn_vertical_offset: {config.spawn_vertical_offset}")
    print(f"density_check_max: {config.density_check_max}")
    print(f"difficulty: {config.difficulty}")
    print(f"hidden_quests: {config.hidden_quests}")
