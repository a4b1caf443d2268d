from setuptools import find_packages, setup

setup(
    name='static-manifest',
    version='0.1.0',
    description='Generate a manifest module of cache-busted static files',
    packages=find_packages(include=['static_manifest', 'static_manifest.*']),
    package_data={'static_manifest': ['templates/*/*.j2']},
    python_requires='>=3.10',
    install_requires=[
        'jinja2',
        'typing_extensions; python_version < "3.12"',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'static-manifest = static_manifest.__main__:main',
        ],
    },
)
