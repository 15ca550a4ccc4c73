from setuptools import setup

setup(
    name="schemaprint",
    python_requires='>=3.8.0',
    packages=['schemaprint', 'schemaprint.sdl'],
    package_data={
        'schemaprint.sdl': [
            'templates/full/*.graphql.tmpl',
            'templates/minified/*.graphql.tmpl',
        ],
    },
    version='0.1.0',
    install_requires=[
        'graphql-core>=3.2,<3.3',
        'jinja2',
        'requests',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
