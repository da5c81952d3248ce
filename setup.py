from setuptools import find_packages, setup

# Installation en mode développement :
#   pip install -e .[test]
#   python -m admin_panel publish

setup(
    name='admin-panel',
    version='1.4.0',
    description="Registre de menus, permissions et ressources pour tableau de bord d'administration",
    packages=find_packages(include=['admin_panel', 'admin_panel.*'], exclude=['admin_panel.tests']),
    package_data={
        'admin_panel': ['public/*.json', 'public/js/*.js', 'public/css/*.css'],
    },
    python_requires='>=3.10',
    install_requires=[
        'fastapi',
        'pydantic>=2',
        'uvicorn',
    ],
    extras_require={
        'test': ['pytest', 'httpx'],
    },
    entry_points={
        'console_scripts': ['admin-panel=admin_panel.cli:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Framework :: FastAPI',
    ],
)
