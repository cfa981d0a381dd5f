import dociopts

with open('source/options.rst', 'w+') as f:
    f.write(dociopts.make_options_rst(dociopts.doci_options))
