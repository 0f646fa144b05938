from flagfile.runtime.argv import default_files, expand_argv, init, load_files

__all__ = ['default_files', 'expand_argv', 'init', 'load_files']
