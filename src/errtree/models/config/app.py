# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

OutputFormat = Literal['text', 'json', 'rich']
LogLevel = Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class AppConfig(BaseModel):
    format: OutputFormat = 'text'  # noqa: A003
    json_indent: int = Field(default=2, ge=0)
    log_level: LogLevel = 'WARNING'
