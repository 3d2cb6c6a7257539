#!/usr/bin/env python3
"""Basic usage example"""

import simply_log
from simply_log import LogLevel, MemoryAppender, RegistryBuilder

def main():
    # Process-wide registry
    log = simply_log.console_logger("example")
    log.info("Application started")
    log.debug("This is hidden at the default INFO level")

    log.set_level(simply_log.TRACE)
    log.trace("Now everything shows")

    # Explicit registry with colors and a default appender
    memory = MemoryAppender()
    registry = (RegistryBuilder()
        .with_default_level(LogLevel.DEBUG)
        .with_console(colored=True)
        .with_color("info", "#888")
        .add_default_appender(memory)
        .build())

    db = registry.get_logger("db")
    if db.is_logged(LogLevel.DEBUG):
        db.debug("pool size", 8)
    db.warn("slow query", 1.5, "s")
    db.error("connection lost")

    print(f"captured {len(memory)} messages: {memory.messages()}")

if __name__ == "__main__":
    main()
