[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filetools"
version = "0.1.0"
description = "Small file and filesystem utilities: MD5 hashing, tree walking, line numbering, binary pixel records and a FIFO echo server"
requires-python = ">=3.10"
dependencies = []
keywords = ["files", "filesystem", "md5", "fifo", "walk", "readlines", "pixels"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filetools-md5 = "filetools.md5hash:main"
filetools-walk = "filetools.walk:main"
filetools-writes = "filetools.writes:main"
filetools-fileops = "filetools.fileops:main"
filetools-pixels = "filetools.pixels:main"
filetools-readlines = "filetools.readlines:main"
filetools-readlines-numbered = "filetools.readlines:main_numbered"
filetools-fifo = "filetools.fifo:main"

[tool.hatch.build.targets.wheel]
packages = ["filetools"]

[tool.pytest.ini_options]
addopts = "-ra"
