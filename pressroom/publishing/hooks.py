from framework.hooks import Filter

# handler(label) -> str
button_label = Filter('publish_and_add_new_button_label')
# handler(should_show, screen) -> bool
should_show_button = Filter('publish_and_add_new_should_show_the_button')
