#!/usr/bin/env python3
"""Basic usage example"""

from logdev import LoggerConfig, LoggerRegistry, LogLevel

def main():
    # Registry with its own log directory
    registry = LoggerRegistry(LoggerConfig(log_directory="logs", cut_log_prefix=False))

    logger = registry.create_logger("example", log_level=LogLevel.TRACE)

    # Log messages
    logger.trace("This is trace")
    logger.debug("This is debug")
    logger.information("Application started with %d workers", 4)
    logger.log(lambda: "Built lazily")
    logger.warning("This is warning")
    logger.error("This is error")

    print(f"Writing to {logger.fully_qualified_log_file_name}")

    # Stop writing files and drop every non-default logger
    logger.log_to_file_system = False
    registry.try_clear_all_loggers()

if __name__ == "__main__":
    main()
