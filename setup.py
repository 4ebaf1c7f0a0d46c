from setuptools import setup, find_packages

setup(
    name='nmearoute',
    description='Clean and deduplicate NMEA 0183 GNSS logs into a route.',
    long_description=open('README.md', 'r').read(),
    long_description_content_type='text/markdown',
    version='0.1.0',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    include_package_data=True,
    python_requires='>=3.9',
    install_requires=[
        'click',
        'pandas',
        'zstandard'
    ],
    extras_require={
        'test': [
            'pytest'
        ]
    },
    entry_points={
        'console_scripts': [
            'nmearoute=nmearoute.cli.cli:cli'
        ]
    },
    zip_safe=True
)
