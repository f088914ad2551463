from setuptools import setup, find_packages

# -------------------------------------------------------------------------------------------------
install_requires = [
    'colorama',
]

# -------------------------------------------------------------------------------------------------
extras_require = {
    'test': ['pytest'],
}

# -------------------------------------------------------------------------------------------------
setup(
    name='mesh_formats',
    version='0.1',
    packages=find_packages(include=['mesh_formats', 'mesh_formats.*']),
    python_requires='>=3.9',
    install_requires=install_requires,
    extras_require=extras_require,
)
