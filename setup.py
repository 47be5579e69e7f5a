import setuptools
from pathlib import Path


readme_path = Path(__file__).parent / 'README.md'
long_description = readme_path.read_text()


setuptools.setup(
    name='picdisasm',
    version='0.1.0',
    description='8-bit PIC program disassembler for Intel HEX and Motorola S-Record files.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(include=['picdisasm*']),
    entry_points = {
        'console_scripts' : [
            'picdisasm=picdisasm.tools.picdisasm:main',
            'picarches=picdisasm.tools.picarches:main',
            'picformats=picdisasm.tools.picformats:main'
        ]
    },
    python_requires='>=3.8',
    install_requires=[
        'bincopy'
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent'
    ]
)
