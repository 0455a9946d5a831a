from setuptools import setup

setup(
    name='cb-interpreter',
    version='0.1.0',
    description='CB language lexer and token REPL',
    package_dir={'cb': 'src/cb'},
    packages=['cb', 'cb.cli'],
    include_package_data=True,
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'cb = cb.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
