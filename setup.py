"""
Packaging script for PyPI.
"""
import setuptools
from pathlib import Path

try:
	from boozetools.macroparse.runtime import make_tables
except ImportError:
	pass
else:
	make_tables(Path(__file__).parent / "semtype" / "Notation.md")

setuptools.setup(
	name='semtype',
	version='0.1.0',
	packages=['semtype', ],
	package_data={
		'semtype': ["Notation.md", "Notation.automaton"],
	},
	entry_points={
		'console_scripts': ["semtype = semtype.cmdline:main"],
	},
	license='MIT',
	description='An algebra of semantic types for annotating logical forms: atoms, curried functions, and alternations.',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Science/Research",
		"Topic :: Text Processing :: Linguistic",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		'test': ["pytest"],
	},
)
