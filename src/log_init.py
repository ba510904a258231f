# Copyright (c) 2025, Jannick Sebastian Strobel
# All rights reserved.

# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import logging

logger = logging.getLogger()
formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")

def config_logger(path=None, level=logging.INFO):
    """
    Configures the global logger for console output and, optionally, a log file.

    Args:
        path (str, optional): Path of the log file. Without it only the console is used.
        level (int or str): Logging level, e.g. logging.DEBUG or "DEBUG".

    Returns:
        logging.Logger: The configured root logger.
    """
    if isinstance(level, str):
        level_name = level.upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level {level_name}")

    # Drop handlers of a previous configuration to avoid duplicate lines
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if path is not None:
        file_handler = logging.FileHandler(path)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
