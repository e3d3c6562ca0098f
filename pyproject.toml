[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threadkit"
version = "0.1.0"
description = "Thread synchronisation primitives, producer/consumer buffers, file streams, timing helpers and tagged loggers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "threading",
    "event",
    "monitor",
    "ring-buffer",
    "producer-consumer",
    "logging",
    "stopwatch",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
threadkit-event-demo = "threadkit.lockfree_event:main"
threadkit-ring-buffer-demo = "threadkit.ring_buffer:main"
threadkit-audio-demo = "threadkit.audio_pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["threadkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
