# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import os
from typing import Any, Optional

from aws_lambda_powertools import Logger


class PowertoolsLogger:
    def __init__(self, service_name: Optional[str] = None, level: str = "info"):
        self.service_name = service_name or os.getenv(
            "POWERTOOLS_SERVICE_NAME", "handel-sns"
        )
        self._level = level.upper()
        self.logger = Logger(service=self.service_name, level=self._level)

    def debug(self, message: str, **kwargs: Any) -> None:
        if kwargs:
            self.logger.debug(message, extra=kwargs)
        else:
            self.logger.debug(message)

    def info(self, message: str, **kwargs: Any) -> None:
        if kwargs:
            self.logger.info(message, extra=kwargs)
        else:
            self.logger.info(message)

    def warning(self, message: str, **kwargs: Any) -> None:
        if kwargs:
            self.logger.warning(message, extra=kwargs)
        else:
            self.logger.warning(message)

    def error(self, message: str, **kwargs: Any) -> None:
        if kwargs:
            self.logger.error(message, extra=kwargs)
        else:
            self.logger.error(message)

    def config(self, level: str = "info") -> None:
        self._level = level.upper()
        self.logger.setLevel(self._level)

    @property
    def level(self) -> int:
        return getattr(logging, self._level, logging.INFO)


def get_logger(
    service_name: Optional[str] = None, level: Optional[str] = None
) -> PowertoolsLogger:
    return PowertoolsLogger(
        service_name, level or os.getenv("POWERTOOLS_LOG_LEVEL", "info")
    )
