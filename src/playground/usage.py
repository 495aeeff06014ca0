"""Usage text printed for the help flag."""

USAGE = """\
Playground
----------
Easily create Swift playgrounds from the command line

Options:

  -t  Specify a target path where the playground should be created
      Default: <base directory>/<date>.playground
  -p  Select platform (iOS, macOS or tvOS) that the playground should run on
      Default: iOS
  -a  Turn on auto run for the generated playground
      Default: False
  -d  Specify any Xcode projects that you wish to add as dependencies
      Should be a comma-separated list of file paths
  -c  Any code that you want the playground to contain
      Pass this flag without a value to use the contents of your clipboard
      Default: An empty playground that imports the system framework
  -u  Any URL to code that you want the playground to contain
      Gist & GitHub links are automatically handled
  -v  Fill the playground with the code required to prototype a view
      Default: Any code specified with -c or its default value
  -f  Force overwrite any existing playground at the target path
      Default: Don't overwrite, and instead open any existing playground
  -h  Display this information

Environment:

  PLAYGROUND_BASE_DIR          Base directory for the default target path
  PLAYGROUND_DOWNLOAD_TIMEOUT  Seconds to wait when downloading code (default: 10)
  PLAYGROUND_OPEN_COMMAND      Command used to open the result (default: open)"""
