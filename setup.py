import setuptools

setuptools.setup(
	name='pieces-of-text',
	version='1.0.0',
	packages=[
		'pot',
		'pot.parsing',
		'pot.scanning',
		'pot.support',
	],
	description='Lazy pull-based parser and pretty printer for POT (Pieces of Text)',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	extras_require={
		'test': ['pytest'],
	},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Text Processing",
		"Development Status :: 4 - Beta",
    ],
)
