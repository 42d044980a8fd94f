[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "joinwatch"
version = "0.1.0"
description = "Core logic for a Telegram bot that watches channel join requests, greets new members and guards admin menus"
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["telegram", "bot", "channel", "join-requests", "captcha", "notifications"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["joinwatch"]

[tool.pytest.ini_options]
addopts = "-ra"
