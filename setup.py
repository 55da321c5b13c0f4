from setuptools import setup, find_packages

setup(
    name='crc16',
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    entry_points={
        'console_scripts': [
            'crc16=crc16.crc_main:main',
        ],
    },
    install_requires=[],
    extras_require={
        'test': ['pytest>=7'],
    },
    python_requires='>=3.7',
    # Optional metadata
    author='R. D. Poor',
    author_email='rdpoor # gmail.com',
    description='Table-driven CRC-16 checksums (ANSI and CCITT polynomials).',
    license='MIT',
    keywords='crc crc16 checksum',
    url='http://github/rdpoor/crc16',
)
