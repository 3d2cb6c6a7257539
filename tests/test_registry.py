"""Tests for the logger registry"""

import io
import threading

import pytest
from unittest.mock import Mock

import simply_log
from simply_log import (
    InvalidLevelError,
    LogLevel,
    MemoryAppender,
    Registry,
    RegistryBuilder,
    RegistryConfig,
)


class TestRegistry:
    """Test Registry lookup and defaults."""

    def test_get_logger_returns_same_instance(self):
        registry = Registry()
        assert registry.get_logger("x") is registry.get_logger("x")

    def test_distinct_names_distinct_loggers(self):
        registry = Registry()
        assert registry.get_logger("a") is not registry.get_logger("b")

    def test_registries_are_isolated(self):
        assert Registry().get_logger("x") is not Registry().get_logger("x")

    def test_new_logger_uses_default_level(self):
        registry = Registry()
        assert registry.default_level == LogLevel.INFO
        assert registry.get_logger("svc").level == LogLevel.INFO

    def test_set_default_level_is_not_retroactive(self):
        registry = Registry()
        before = registry.get_logger("before")

        registry.set_default_level(LogLevel.DEBUG)
        after = registry.get_logger("new")

        assert after.is_logged(LogLevel.DEBUG)
        assert after.is_logged(LogLevel.ERROR)
        assert not after.is_logged(LogLevel.TRACE)
        assert before.level == LogLevel.INFO

    def test_set_default_level_by_name(self):
        registry = Registry().set_default_level("trace")
        assert registry.default_level == LogLevel.TRACE

    def test_set_default_level_digit_string(self):
        registry = Registry().set_default_level("4")
        assert registry.default_level == LogLevel.DEBUG

    def test_set_default_level_invalid(self):
        registry = Registry()
        with pytest.raises(InvalidLevelError):
            registry.set_default_level("chatty")
        assert registry.default_level == LogLevel.INFO

    def test_default_appenders_seed_new_loggers(self):
        registry = Registry()
        first, second = Mock(), Mock()
        registry.add_default_appender(first).add_default_appender(second)

        logger = registry.get_logger("seeded")

        assert logger.appenders == (first, second)

    def test_default_appenders_are_not_retroactive(self):
        registry = Registry()
        early = registry.get_logger("early")

        registry.add_default_appender(Mock())

        assert early.appenders == ()
        assert len(registry.get_logger("late").appenders) == 1

    def test_logger_appenders_independent_of_defaults(self):
        registry = Registry()
        default = Mock()
        registry.add_default_appender(default)
        one = registry.get_logger("one")
        one.add_appender(Mock())

        assert registry.default_appenders == (default,)
        assert registry.get_logger("two").appenders == (default,)

    def test_add_default_appender_rejects_non_callable(self):
        with pytest.raises(TypeError):
            Registry().add_default_appender(42)

    def test_console_logger_attaches_console_once(self):
        stream = io.StringIO()
        registry = Registry(stream=stream)

        registry.console_logger("svc")
        logger = registry.console_logger("svc")
        logger.info("hello")

        assert logger.appenders == (registry.console_appender,)
        assert stream.getvalue() == "svc:info -> hello\n"

    def test_console_logger_on_existing_logger(self):
        registry = Registry(stream=io.StringIO())
        memory = MemoryAppender()
        existing = registry.get_logger("svc").add_appender(memory)

        logger = registry.console_logger("svc")

        assert logger is existing
        assert logger.appenders == (memory, registry.console_appender)

    def test_console_logger_with_console_default(self):
        registry = Registry(stream=io.StringIO())
        registry.add_default_appender(registry.console_appender)

        logger = registry.console_logger("svc")

        assert len(logger.appenders) == 1

    def test_use_colors_toggle(self):
        registry = Registry()
        assert registry.use_colors is False
        registry.use_colors = True
        assert registry.console_appender.palette.use_colors is True

    def test_introspection(self):
        registry = Registry()
        registry.get_logger("a")
        registry.get_logger("b")

        assert "a" in registry
        assert "c" not in registry
        assert len(registry) == 2
        assert registry.logger_names() == ["a", "b"]

    def test_concurrent_get_logger(self):
        registry = Registry()
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(registry.get_logger("shared"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(logger is results[0] for logger in results)
        assert len(registry) == 1


class TestRegistryColors:
    """Test color accessor."""

    def test_default_color(self):
        assert Registry().color("warn") == "#FF0"

    def test_set_color_adds_hash(self):
        registry = Registry()
        assert registry.color("warn", "00F") == "#00F"
        assert registry.color("warn") == "#00F"

    def test_set_color_keeps_hash(self):
        assert Registry().color("info", "#123456") == "#123456"

    def test_short_color_is_ignored(self):
        registry = Registry()
        assert registry.color("error", "F0") == "#F00"

    def test_case_insensitive_name(self):
        assert Registry().color("DeBuG") == "#0F0"

    def test_numeric_rank(self):
        registry = Registry()
        assert registry.color(LogLevel.TRACE) == "#00F"
        assert registry.color(1) == "#F00"
        assert registry.color("3") == "#FF0"

    def test_unknown_level(self):
        registry = Registry()
        assert registry.color("unknown") is None
        assert registry.color(LogLevel.OFF) is None
        assert registry.color(9, "#FFF") is None

    def test_registry_rejects_invalid_colors(self):
        with pytest.raises(ValueError):
            Registry(colors={"fatal": "#F00"})
        with pytest.raises(ValueError):
            Registry(colors={"info": "#0"})
        with pytest.raises(ValueError):
            Registry(colors={2: "#F00"})

    def test_colors_are_per_registry(self):
        first, second = Registry(), Registry()
        first.color("info", "#ABC")
        assert second.color("info") == "#000"


class TestRegistryConfig:
    """Test registry configuration."""

    def test_default_config(self):
        config = RegistryConfig.default()
        assert config.default_level == LogLevel.INFO
        assert config.console_output is False
        assert config.use_colors is False
        assert config.colors["error"] == "#F00"

    def test_debug_config(self):
        config = RegistryConfig.debug_config()
        assert config.default_level == LogLevel.DEBUG
        assert config.use_colors is True

    def test_silent_config(self):
        registry = Registry.from_config(RegistryConfig.silent_config())
        assert not registry.get_logger("x").is_logged(LogLevel.ERROR)

    def test_level_name_accepted(self):
        assert RegistryConfig(default_level="warn").default_level == LogLevel.WARN

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            RegistryConfig(default_level="nope")
        with pytest.raises(ValueError):
            RegistryConfig(default_level=-1)

    def test_invalid_colors(self):
        with pytest.raises(ValueError):
            RegistryConfig(colors={"fatal": "#F00"})
        with pytest.raises(ValueError):
            RegistryConfig(colors={"info": "#0"})

    def test_from_config(self):
        stream = io.StringIO()
        config = RegistryConfig(
            default_level=LogLevel.ERROR,
            console_output=True,
            colors={"info": "#888"},
            stream=stream,
        )
        registry = Registry.from_config(config)

        logger = registry.get_logger("app")
        logger.error("disk", 91, "%")
        logger.info("hidden")

        assert registry.color("info") == "#888"
        assert logger.appenders == (registry.console_appender,)
        assert stream.getvalue() == "app:error -> disk 91 %\n"

    def test_warn_threshold_accepts_info(self):
        memory = MemoryAppender()
        registry = Registry.from_config(RegistryConfig(default_level=LogLevel.WARN))
        registry.add_default_appender(memory)

        logger = registry.get_logger("app")
        logger.info("shown")
        logger.debug("hidden")

        assert memory.messages() == ["shown"]

    def test_production_config_only_errors(self):
        config = RegistryConfig.production_config()
        registry = Registry.from_config(config)
        logger = registry.get_logger("prod")

        assert config.default_level == LogLevel.ERROR
        assert logger.is_logged(LogLevel.ERROR)
        assert not logger.is_logged(LogLevel.INFO)

    def test_non_string_color_key(self):
        with pytest.raises(ValueError):
            RegistryConfig(colors={1: "#F00"})


class TestRegistryBuilder:
    """Test builder pattern."""

    def test_builder_pattern(self):
        memory = MemoryAppender()
        registry = (RegistryBuilder()
            .with_default_level(LogLevel.DEBUG)
            .with_color("info", "888")
            .add_default_appender(memory)
            .build())

        registry.get_logger("built").debug("ready")

        assert registry.default_level == LogLevel.DEBUG
        assert registry.color("info") == "#888"
        assert memory.records[0].logger_name == "built"

    def test_builder_with_console(self):
        stream = io.StringIO()
        registry = (RegistryBuilder()
            .with_console(colored=True, stream=stream)
            .build())

        assert registry.use_colors is True
        assert registry.default_appenders == (registry.console_appender,)

    def test_builder_console_keeps_colors(self):
        registry = RegistryBuilder().with_colors(True).with_console().build()
        assert registry.use_colors is True

    def test_builder_console_colored_flag(self):
        registry = RegistryBuilder().with_colors(True).with_console(colored=False).build()
        assert registry.use_colors is False

    def test_builder_validates(self):
        with pytest.raises(ValueError):
            RegistryBuilder().with_default_level("bogus").build()


class TestModuleFacade:
    """Test the process-wide registry functions."""

    def test_level_constants(self):
        assert simply_log.OFF < 1
        assert (simply_log.ERROR, simply_log.INFO, simply_log.WARN,
                simply_log.DEBUG, simply_log.TRACE) == (1, 2, 3, 4, 5)

    def test_module_functions_share_registry(self):
        logger = simply_log.get_logger("facade-test")
        assert simply_log.default_registry.get_logger("facade-test") is logger
        assert "facade-test" in simply_log.default_registry

    def test_module_color(self):
        assert simply_log.color("unknown") is None
        assert simply_log.color("error") == simply_log.default_registry.color("error")
