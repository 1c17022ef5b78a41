from pathlib import Path
from setuptools import setup, find_packages

HERE = Path(__file__).parent


def parse_requirements(requirements):
    with open(HERE / requirements) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]


requirements = parse_requirements("requirements.txt")

setup(
    name='educms',
    version='0.1.0',
    description='CRUD proxy and client for the EduCMS learning platform',
    install_requires=requirements,
    python_requires='>=3.10',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    py_modules=['server'],
    package_data={
        'educms_backend.exceptions': ['error_registry.yaml'],
    },
    extras_require={
        'test': [
            'pytest>=7.4.0',
            'pytest-asyncio>=0.23.0',
            'respx>=0.21.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'educms-server=server:main',
        ],
    },
)
