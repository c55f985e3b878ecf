import setuptools

setuptools.setup(
    name="coffee-menu",
    version="0.0.1",

    description="Coffee shop menu page generator and the CDK stack that serves it",
    author="author",

    packages=setuptools.find_packages(include=["menu_builder", "menu_builder.*", "infra", "infra.*"]),

    install_requires=[
        "aws-cdk-lib>=2.156.0",
        "constructs>=10.0.0,<11.0.0",
        "PyYAML>=6.0",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "loguru>=0.7",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },

    entry_points={
        "console_scripts": [
            "build-menu=menu_builder.cli:main",
        ],
    },

    python_requires=">=3.9",

    classifiers=[
        "Development Status :: 4 - Beta",

        "Intended Audience :: Developers",

        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",

        "Topic :: Software Development :: Code Generators",
        "Topic :: Utilities",

        "Typing :: Typed",
    ],
)
