"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='yard-calc',
	version='0.1.0',
	packages=['yard'],
	entry_points={
		'console_scripts': ["yard = yard.cmdline:main"],
	},
	license='MIT',
	description='A shunting-yard calculator for whitespace-separated integer arithmetic',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Education",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
