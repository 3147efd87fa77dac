"""Handles interactive/command-line mode for the mscript interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """mscript interpreter shell."""
    intro = "mscript interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def default(self, line):
        """Executes arbitrary mscript statements."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line, add_to_prev = self.sess.preprocess_line(line, self._tmp_line)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
            else:
                self._tmp_line = ""
                self.prompt = self._tmp_prompt

                self.sess.add(line, self.line_num)
                self.sess.run()

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the mscript interpreter!\n\n"
              "Statements end with ';'. Assign with 'x = 4 * 2;' and print with 'print(x);'.\n"
              "Numbers, 'quoted' or \"quoted\" strings and + - * / are supported. Adding\n"
              "anything to a string concatenates: 'print(\"x is \" + x);'.\n\n"
              "Variables are kept until you leave with 'exit' or end of input (Ctrl-D).")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
