"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='sprig-lang',
	version='0.0.1',
	packages=['sprig', ],
	license='MIT',
	description='Evaluation core for a small expression language: integers, flags, conditionals, and early return',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Education",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		'test': ["pytest"],
	},
)
