import setuptools

setuptools.setup(
    name="antipattern_playbook",
    version="0.1",
    description="Anti-Pattern Playbook: searchable catalog of delivery anti-patterns and supporting quotes",
    packages=[
        "controllers",
        "repositories",
        "services",
        "utils",
        "widgets",
        "widgets.dialogs",
    ],
    py_modules=["main"],
    classifiers=["Programming Language :: Python :: 3"],
    python_requires=">=3.11",
    install_requires=[
        "loguru",
        "curl_cffi",  # Fetching datasets from an http(s) base URL
    ],
    extras_require={
        "gui": ["wxPython"],  # Desktop browser window (main.py)
        "test": ["pytest"],
    },
)
