[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "krtools"
version = "0.1.0"
description = "Small text filters, C-source scanners and teaching utilities: keyword counts, cross references, macro expansion, paging, buffered I/O and a free-list allocator"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "text",
    "filter",
    "cross-reference",
    "word-frequency",
    "preprocessor",
    "calculator",
    "allocator",
    "cli",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Education",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kr-keywords = "krtools.cscan:count_keywords_main"
kr-vargroup = "krtools.cscan:var_group_main"
kr-xref = "krtools.xref:xref_main"
kr-wordfreq = "krtools.xref:frequency_main"
kr-hashdemo = "krtools.hashtab:main"
kr-define = "krtools.define:main"
kr-visprint = "krtools.charconv:print_main"
kr-minfmt = "krtools.minfmt:main"
kr-calc = "krtools.calculator:main"
kr-numbers = "krtools.basics:numbers_main"
kr-login = "krtools.basics:login_main"
kr-compare = "krtools.filetools:compare_main"
kr-find = "krtools.filetools:find_main"
kr-pages = "krtools.filetools:pages_main"
kr-cat = "krtools.filetools:cat_main"
kr-fsize = "krtools.fsize:main"
kr-bufcopy = "krtools.bufio:main"
kr-alloc = "krtools.alloc:main"

[tool.hatch.build.targets.wheel]
packages = ["krtools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
